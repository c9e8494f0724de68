from pydantic import StrictBool, StrictFloat, StrictInt, StrictStr, create_model
from typing import Dict, List, Optional

from hc3.values import (
    CentralSceneSupport,
    DeviceParameter,
    FavoritePosition,
    HC3Model,
    Icon,
    OpaqueJSON,
    Power,
    QuickAppVariable,
    UICallback,
    Value,
)

_BOOL = Optional[StrictBool]
_INT = Optional[StrictInt]
_FLOAT = Optional[StrictFloat]
_STR = Optional[StrictStr]

# Vendor property bag of a device. Which keys appear depends on the device
# class and firmware, so every entry is optional.
PROPERTY_TYPES = {
    "alarmLevel": _INT,
    "alarmType": _INT,
    "armed": _BOOL,
    "associationMode": _INT,
    "availableDoorLockModes": Optional[List[StrictStr]],
    "availablePositions": Optional[List[Dict[str, StrictStr]]],
    "availableScenes": Optional[List[Dict[str, StrictInt]]],
    "batteryLevel": _INT,
    "batteryLowNotification": _BOOL,
    "buttonHold": _INT,
    "buttonsType": _STR,
    "currentHumidity": _INT,
    "showFreezeAlarm": _BOOL,
    "showFireAlarm": _BOOL,
    "buttonType": _INT,
    "motorInversion": _BOOL,
    "steeringInversion": _BOOL,
    "movingUpTime": _INT,
    "movingDownTime": _INT,
    "slatsRotationTime": _INT,
    "virtualBottomLimit": _INT,
    "cameraType": _INT,
    "categories": Optional[List[StrictStr]],
    "calibrationVariants": Optional[List[StrictStr]],
    "calibrated": _BOOL,
    "centralSceneSupport": Optional[List[CentralSceneSupport]],
    "channel1": _STR,
    "channel2": _STR,
    "channel3": _STR,
    "channel4": _STR,
    "climateZoneHash": _STR,
    "climateZoneId": _INT,
    "configured": _BOOL,
    "dead": _BOOL,
    "position": _STR,
    "port": _FLOAT,
    "strategy": _STR,
    "deadReason": _STR,
    "defInterval": _INT,
    "defaultPartyTime": _INT,
    "defaultTone": _INT,
    "defaultWateringTime": _INT,
    "deviceControlType": _INT,
    "deviceRole": _STR,
    "supportedDeviceRoles": Optional[List[StrictStr]],
    "deviceGroup": Optional[List[StrictInt]],
    "deviceGroupMaster": _INT,
    "deviceIcon": _INT,
    "devices": Optional[List[StrictInt]],
    "devicesInitializationProcess": _STR,
    "DeviceUID": _STR,
    "displayOnMainPage": _INT,
    "doorLockMode": _STR,
    "emailNotificationID": _INT,
    "emailNotificationType": _INT,
    "endPointId": _INT,
    "externalSensorConnected": _BOOL,
    "favoritePositionsNativeSupport": _BOOL,
    "favoritePositions": Optional[List[FavoritePosition]],
    "fgrgbwMode": _STR,
    "fidUuid": _STR,
    "fidLastSynchronizationTimestamp": _INT,
    "fidRole": _STR,
    "gatewayId": _STR,
    "humidityThreshold": _INT,
    "httpsEnabled": _BOOL,
    "icon": Optional[Icon],
    "includeInEnergyPanel": _BOOL,
    "ip": _STR,
    "isLight": _BOOL,
    "jpgPath": _STR,
    "lastBreached": _FLOAT,
    "lastHealthy": _FLOAT,
    "lastLoggedUser": _FLOAT,
    "lastModerate": _FLOAT,
    "liliOffCommand": _STR,
    "liliOnCommand": _STR,
    "linkedDeviceType": _STR,
    "localProtectionState": _INT,
    "localProtectionSupport": _INT,
    "log": _STR,
    "logTemp": _STR,
    "manufacturer": _STR,
    "markAsDead": _BOOL,
    "maxInterval": _INT,
    "maxUsers": _INT,
    "maxValue": _INT,
    "maxVoltage": _INT,
    "minInterval": _INT,
    "minValue": _INT,
    "minVoltage": _INT,
    "mjpgPath": _STR,
    "mode": _FLOAT,
    "model": _STR,
    "moveDownPath": _STR,
    "moveLeftPath": _STR,
    "moveRightPath": _STR,
    "moveStopPath": _STR,
    "moveUpPath": _STR,
    "networkStatus": _STR,
    "niceId": _INT,
    "niceProtocol": _STR,
    "nodeId": _INT,
    "numberOfSupportedButtons": _INT,
    "offset": _INT,
    "output1Id": _FLOAT,
    "output2Id": _FLOAT,
    "panicMode": _BOOL,
    "parameters": Optional[List[DeviceParameter]],
    "parametersTemplate": Optional[Value],
    "password": _STR,
    "pendingActions": _BOOL,
    "pollingDeadDevice": _BOOL,
    "pollingInterval": _FLOAT,
    "pollingTimeSec": _INT,
    "power": Optional[Power],
    "productInfo": _STR,
    "protectionExclusiveControl": _INT,
    "protectionState": _INT,
    "protectionTimeout": _FLOAT,
    "protectionTimeoutSupport": _BOOL,
    "pushNotificationID": _INT,
    "pushNotificationType": _FLOAT,
    "rateType": _STR,
    "refreshTime": _INT,
    "remoteId": _INT,
    "remoteGatewayId": _INT,
    "RFProtectionState": _INT,
    "RFProtectionSupport": _INT,
    "rtspPath": _STR,
    "rtspPort": _INT,
    "saveLogs": _BOOL,
    "slatsRange": _INT,
    "slatsRangeMin": _INT,
    "slatsRangeMax": _INT,
    "storeEnergyData": _BOOL,
    "saveToEnergyPanel": _BOOL,
    "securityLevel": _STR,
    "securitySchemes": Optional[List[StrictStr]],
    "sendStopAfterMove": _BOOL,
    "serialNumber": _STR,
    "showEnergy": _BOOL,
    "state": Optional[Value],
    "energy": _FLOAT,
    "sipUserPassword": _STR,
    "sipDisplayName": _STR,
    "sipUserID": _STR,
    "sipUserEnabled": _BOOL,
    "smsNotificationID": _INT,
    "smsNotificationType": _FLOAT,
    "softwareVersion": _STR,
    "stepInterval": _FLOAT,
    "supportedThermostatFanModes": Optional[List[StrictStr]],
    "supportedThermostatModes": Optional[List[StrictStr]],
    "tamperMode": _STR,
    "targetLevel": _FLOAT,
    "targetLevelDry": _FLOAT,
    "targetLevelHumidify": _FLOAT,
    "targetLevelMax": _FLOAT,
    "targetLevelMin": _FLOAT,
    "targetLevelStep": _FLOAT,
    "targetLevelTimestamp": _FLOAT,
    "thermostatFanMode": _STR,
    "thermostatFanOff": _BOOL,
    "thermostatFanState": _STR,
    "thermostatMode": _STR,
    "thermostatModeFuture": _STR,
    "thermostatOperatingState": _STR,
    "thermostatModeManufacturerData": Optional[List[StrictInt]],
    "thermostatState": _STR,
    "powerConsumption": _FLOAT,
    "timestamp": _INT,
    "tone": _INT,
    "unit": _STR,
    "updateVersion": _STR,
    "useTemplate": _BOOL,
    "userDescription": _STR,
    "username": _STR,
    "wakeUpTime": _FLOAT,
    "zwaveCompany": _STR,
    "zwaveInfo": _STR,
    "zwaveVersion": _STR,
    "value": Optional[Value],
    "viewLayout": Optional[OpaqueJSON],
    "volume": _INT,
    "mainFunction": _STR,
    "uiCallbacks": Optional[List[UICallback]],
    "quickAppVariables": Optional[List[QuickAppVariable]],
    "walliOperatingMode": _STR,
    "ringUpperColor": _STR,
    "ringBottomColor": _STR,
    "ringBrightness": _FLOAT,
    "ringLightMode": _STR,
    "ringConfirmingTime": _FLOAT,
    "encrypted": _BOOL,
}

# Subset decoded for DeviceSimple listings
SIMPLE_PROPERTY_NAMES = (
    "armed",
    "batteryLevel",
    "categories",
    "dead",
    "position",
    "deadReason",
    "deviceControlType",
    "deviceRole",
    "icon",
    "includeInEnergyPanel",
    "isLight",
    "jpgPath",
    "lastBreached",
    "lastHealthy",
    "lastLoggedUser",
    "log",
    "logTemp",
    "manufacturer",
    "markAsDead",
    "model",
    "power",
    "productInfo",
    "rateType",
    "storeEnergyData",
    "saveToEnergyPanel",
    "serialNumber",
    "showEnergy",
    "state",
    "energy",
    "softwareVersion",
    "thermostatFanMode",
    "thermostatFanOff",
    "thermostatFanState",
    "thermostatMode",
    "thermostatModeFuture",
    "thermostatOperatingState",
    "thermostatModeManufacturerData",
    "thermostatState",
    "powerConsumption",
    "timestamp",
    "unit",
    "updateVersion",
    "useTemplate",
    "userDescription",
    "wakeUpTime",
    "zwaveCompany",
    "zwaveInfo",
    "zwaveVersion",
    "value",
    "volume",
    "uiCallbacks",
    "quickAppVariables",
)


def _build(name, names):
    fields = {key: (PROPERTY_TYPES[key], None) for key in names}
    return create_model(name, __base__=HC3Model, __module__=__name__, **fields)


Properties = _build("Properties", PROPERTY_TYPES)
PropertiesSimple = _build("PropertiesSimple", SIMPLE_PROPERTY_NAMES)
