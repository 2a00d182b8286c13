"""Static current-weather snapshots per region, in OpenWeatherMap response shape."""

WEATHER_SNAPSHOTS = {
    "Miami": {
        "weather": {"main": "Rain", "description": "heavy rain", "icon": "10d"},
        "main": {"temp": 28, "humidity": 85},
        "wind": {"speed": 15, "deg": 180},
        "rain": {"1h": 25},
        "alerts": [{"event": "Flood", "description": "Flash flood warning in effect"}],
    },
    "Houston": {
        "weather": {"main": "Thunderstorm", "description": "thunderstorm with heavy rain", "icon": "11d"},
        "main": {"temp": 30, "humidity": 80},
        "wind": {"speed": 20, "deg": 220},
        "rain": {"1h": 30},
        "alerts": [
            {"event": "Severe Thunderstorm", "description": "Severe thunderstorm warning in effect"}
        ],
    },
    "NewYork": {
        "weather": {"main": "Clear", "description": "clear sky", "icon": "01d"},
        "main": {"temp": 22, "humidity": 60},
        "wind": {"speed": 8, "deg": 270},
    },
    "SanFrancisco": {
        "weather": {"main": "Fog", "description": "fog", "icon": "50d"},
        "main": {"temp": 18, "humidity": 75},
        "wind": {"speed": 12, "deg": 290},
    },
    "NewOrleans": {
        "weather": {"main": "Rain", "description": "moderate rain", "icon": "10d"},
        "main": {"temp": 29, "humidity": 82},
        "wind": {"speed": 18, "deg": 200},
        "rain": {"1h": 15},
    },
}
