import logging
import sys

from hc3.api.fibaro import FibaroAPI
from hc3.client import HC3Client
from hc3.decoder import HC3Error

logging.basicConfig(level=logging.INFO)


def verify_hub():
    print("Verifying hub access...")

    with HC3Client.from_env() as client:
        fibaro = FibaroAPI(client)
        try:
            devices = fibaro.get_devices()
            print(f"Devices: {len(devices)}")
            for device in devices[:5]:
                print(f"  {device.id}: {device.name} ({device.type})")

            variables = fibaro.get_global_variables()
            print(f"Global variables: {len(variables)}")
            if variables:
                value, modified = fibaro.get_global_variable(variables[0].name)
                print(f"  {variables[0].name} = {value!r} (modified {modified})")
        except HC3Error as e:
            print(f"FAILURE: {e.__class__.__name__} code={e.code} {e.message}")
            return False

    print("SUCCESS: Hub reachable and responses decoded")
    return True


if __name__ == "__main__":
    sys.exit(0 if verify_hub() else 1)
