from pydantic import StrictBool, StrictInt, StrictStr
from typing import Dict, List, Optional, Tuple

from hc3.properties import Properties, PropertiesSimple
from hc3.values import HC3Model, OpaqueJSON


class Device(HC3Model):
    id: StrictInt
    name: Optional[StrictStr] = None
    roomID: Optional[StrictInt] = None
    view: Optional[List[OpaqueJSON]] = None
    type: Optional[StrictStr] = None
    baseType: Optional[StrictStr] = None
    interfaces: Optional[List[StrictStr]] = None
    enabled: Optional[StrictBool] = None
    visible: Optional[StrictBool] = None
    isPlugin: Optional[StrictBool] = None
    parentId: Optional[StrictInt] = None
    viewXml: Optional[StrictBool] = None
    hasUIView: Optional[StrictBool] = None
    configXml: Optional[StrictBool] = None
    properties: Optional[Properties] = None
    actions: Optional[Dict[str, StrictInt]] = None # action name -> number of arguments
    remoteGatewayId: Optional[StrictInt] = None
    created: Optional[StrictInt] = None
    modified: Optional[StrictInt] = None
    sortOrder: Optional[StrictInt] = None

    # A device is identified by its id alone
    def __eq__(self, other):
        if not isinstance(other, Device):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


class DeviceSimple(Device):
    properties: Optional[PropertiesSimple] = None


class GlobalVariable(HC3Model):
    name: StrictStr
    value: Optional[StrictStr] = None
    readOnly: Optional[StrictBool] = None
    isEnum: Optional[StrictBool] = None
    enumValues: Optional[Tuple[StrictStr, ...]] = None
    created: Optional[StrictInt] = None
    modified: Optional[StrictInt] = None
