from typing import List, Tuple, Type
import logging

from hc3.client import HC3Client
from hc3.decoder import decode
from hc3.models import Device, GlobalVariable

logger = logging.getLogger(__name__)


class FibaroAPI:
    def __init__(self, client: HC3Client):
        self.client = client

    def get_global_variable(self, name: str) -> Tuple[str, int]:
        """Return (value, modified timestamp) of a single global variable"""
        code, _, data = self.client.get(f"/globalVariables/{name}")
        return decode(code, data, GlobalVariable, lambda v: (v.value, v.modified))

    def get_global_variables(self) -> List[GlobalVariable]:
        code, _, data = self.client.get("/globalVariables/")
        return decode(code, data, List[GlobalVariable])

    def get_device(self, device_id: int) -> Device:
        code, _, data = self.client.get(f"/devices/{device_id}")
        return decode(code, data, Device)

    def get_devices(self, query: str = "", model: Type[Device] = Device) -> List[Device]:
        # model may be DeviceSimple for a lighter property set
        path = "/devices" + ("?" + query if query else "")
        code, _, data = self.client.get(path)
        devices = decode(code, data, List[model])
        logger.info(f"Fetched {len(devices)} devices")
        return devices
