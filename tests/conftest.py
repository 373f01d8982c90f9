"""Shared test fixtures and sample API responses."""

from __future__ import annotations

SAMPLE_PUBLIC_IP = {
    "status": "success",
    "country": "Hong Kong",
    "countryCode": "HK",
    "regionName": "HK",
    "city": "Hong Kong",
    "query": "103.149.249.231",
    "lat": 22.3,
    "lon": 114.2,
}

SAMPLE_PUBLIC_IP_TEXT = (
    '{"country":"Hong Kong","regionName":"HK","query":"103.149.249.231","lat":22.3,"lon":114.2}'
)

SAMPLE_ADDRESS = {
    "ip": "113.108.0.1",
    "pro": "广东省",
    "proCode": "440000",
    "city": "广州市",
    "cityCode": "440100",
    "region": "",
    "regionCode": "0",
    "addr": "广东省广州市 电信",
    "regionNames": "",
    "err": "",
}

SAMPLE_ADDRESS_OVERSEAS = {
    "ip": "1.1.1.1",
    "pro": "",
    "city": "",
    "addr": "Tokyo, Japan",
    "err": "noprovince",
}

SAMPLE_WEATHER = {
    "coord": {"lon": 113.26, "lat": 23.13},
    "weather": [{"id": 500, "main": "Rain", "description": "小雨", "icon": "10d"}],
    "base": "stations",
    "main": {
        "temp": 27.4,
        "feels_like": 30.1,
        "temp_min": 26.0,
        "temp_max": 28.9,
        "pressure": 1008,
        "humidity": 83,
    },
    "wind": {"speed": 3.6, "deg": 140},
    "dt": 1718000000,
    "name": "Guangzhou",
}
