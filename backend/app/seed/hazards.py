"""Hazard types, reference regions, and historical event records."""

HAZARD_TYPES = [
    {"id": "flood", "name": "Flooding", "description": "River and coastal flooding events"},
    {"id": "fire", "name": "Wildfire", "description": "Forest and brush fire events"},
    {"id": "wind", "name": "Windstorm", "description": "Hurricane, tornado, and high wind events"},
    {"id": "heat", "name": "Heatwave", "description": "Extreme temperature events"},
]

REGIONS = [
    {"id": "Miami", "name": "Miami", "latitude": 25.7617, "longitude": -80.1918},
    {"id": "Houston", "name": "Houston", "latitude": 29.7604, "longitude": -95.3698},
    {"id": "NewOrleans", "name": "New Orleans", "latitude": 29.9511, "longitude": -90.0715},
    {"id": "NewYork", "name": "New York", "latitude": 40.7128, "longitude": -74.0060},
    {"id": "SanFrancisco", "name": "San Francisco", "latitude": 37.7749, "longitude": -122.4194},
]

# Annual national event history (severity on the 0-5 scale, damage in USD).
# The same record set is published for every hazard type.
HISTORICAL_EVENTS = [
    {"year": 2023, "severity": 4.2, "damage": 2.1e9},
    {"year": 2022, "severity": 3.8, "damage": 1.7e9},
    {"year": 2021, "severity": 4.5, "damage": 2.3e9},
    {"year": 2020, "severity": 3.5, "damage": 1.5e9},
    {"year": 2019, "severity": 3.0, "damage": 1.2e9},
]
