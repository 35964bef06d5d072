"""Canned responses served when the train data service is not configured."""

from app.models import StationData, TrainDetails, TrainStop

_MOCK_STATION = {
    "location": {
        "name": "Bournemouth",
        "crs": "BMH",
        "tiploc": "BOURNMTH",
        "country": "England",
        "system": "National Rail",
    },
    "filter": None,
    "services": [
        {
            "locationDetail": {
                "realtimeActivated": True,
                "tiploc": "BOURNMTH",
                "crs": "BMH",
                "description": "Bournemouth",
                "gbttBookedArrival": "1143",
                "gbttBookedDeparture": "1145",
                "origin": [
                    {
                        "tiploc": "WATRLMN",
                        "description": "London Waterloo",
                        "workingTime": "093500",
                        "publicTime": "0935",
                    }
                ],
                "destination": [
                    {
                        "tiploc": "WEYMTH",
                        "description": "Weymouth",
                        "workingTime": "123000",
                        "publicTime": "1230",
                    }
                ],
                "isCall": True,
                "isPublicCall": True,
                "platform": "3",
                "displayAs": "CALL",
            },
            "serviceUid": "SWR123",
            "runDate": "2025-03-05",
            "trainIdentity": "1W23",
            "runningIdentity": "1W23",
            "atocCode": "SW",
            "atocName": "South Western Railway",
            "serviceType": "train",
            "isPassenger": True,
        },
        {
            "locationDetail": {
                "realtimeActivated": True,
                "tiploc": "BOURNMTH",
                "crs": "BMH",
                "description": "Bournemouth",
                "gbttBookedArrival": "1254",
                "gbttBookedDeparture": "1259",
                "origin": [
                    {
                        "tiploc": "MNCRPIC",
                        "description": "Manchester Piccadilly",
                        "workingTime": "081100",
                        "publicTime": "0811",
                    }
                ],
                "destination": [
                    {
                        "tiploc": "BOURNMTH",
                        "description": "Bournemouth",
                        "workingTime": "125400",
                        "publicTime": "1254",
                    }
                ],
                "isCall": True,
                "isPublicCall": True,
                "platform": "2",
                "displayAs": "DESTINATION",
            },
            "serviceUid": "XC456",
            "runDate": "2025-03-05",
            "trainIdentity": "1O14",
            "runningIdentity": "1O14",
            "atocCode": "XC",
            "atocName": "CrossCountry",
            "serviceType": "train",
            "isPassenger": True,
        },
    ],
}

_MOCK_STOPS = [
    {
        "tiploc": "WATRLOO",
        "description": "London Waterloo",
        "workingTime": "103000",
        "publicTime": "1030",
        "platform": "1",
    },
    {
        "tiploc": "BOURNMTH",
        "description": "Bournemouth",
        "workingTime": "114500",
        "publicTime": "1145",
        "platform": "2",
    },
    {
        "tiploc": "WEYMTH",
        "description": "Weymouth",
        "workingTime": "123000",
        "publicTime": "1230",
        "platform": "1",
    },
]


def mock_station_data(code: str) -> StationData:
    data = StationData.model_validate(_MOCK_STATION)
    data.location.crs = code.upper()
    return data


def mock_train_details(service_uid: str) -> TrainDetails:
    return TrainDetails(
        service_uid=service_uid,
        stops=[TrainStop.model_validate(s) for s in _MOCK_STOPS],
    )
