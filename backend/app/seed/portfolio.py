"""Sample mortgage portfolio: book overview, loan records, and regional risk zones."""

PORTFOLIO_BOOK = {
    "portfolio_id": "portfolio-main",
    "total_loans": 1250,
    "total_value": 375_000_000,
    "average_ltv": 0.72,
    "risk_categories": {"low": 450, "medium": 600, "high": 200},
    "regions": [
        {"name": "Northeast", "count": 300, "value": 95_000_000},
        {"name": "Southeast", "count": 450, "value": 125_000_000},
        {"name": "Midwest", "count": 200, "value": 55_000_000},
        {"name": "Southwest", "count": 150, "value": 45_000_000},
        {"name": "West", "count": 150, "value": 55_000_000},
    ],
}

LOANS = [
    # Miami
    {
        "id": "L001",
        "address": "123 Ocean Dr, Miami, FL",
        "value": 450_000,
        "balance": 306_000,
        "ltv": 0.68,
        "base_risk_level": "high",
        "latitude": 25.7617,
        "longitude": -80.1918,
        "region": "Miami",
        "year_built": 2005,
        "loan_type": "30-year fixed",
        "interest_rate": 4.2,
        "monthly_payment": 1495,
        "insurance_coverage": 400_000,
    },
    {
        "id": "L002",
        "address": "456 Biscayne Blvd, Miami, FL",
        "value": 320_000,
        "balance": 230_400,
        "ltv": 0.72,
        "base_risk_level": "medium",
        "latitude": 25.7827,
        "longitude": -80.2094,
        "region": "Miami",
        "year_built": 2010,
        "loan_type": "15-year fixed",
        "interest_rate": 3.8,
        "monthly_payment": 1680,
        "insurance_coverage": 300_000,
    },
    {
        "id": "L003",
        "address": "789 Collins Ave, Miami, FL",
        "value": 275_000,
        "balance": 178_750,
        "ltv": 0.65,
        "base_risk_level": "low",
        "latitude": 25.7741,
        "longitude": -80.1936,
        "region": "Miami",
        "year_built": 2015,
        "loan_type": "30-year fixed",
        "interest_rate": 3.5,
        "monthly_payment": 800,
        "insurance_coverage": 250_000,
    },
    # Houston
    {
        "id": "L004",
        "address": "321 Main St, Houston, TX",
        "value": 380_000,
        "balance": 285_000,
        "ltv": 0.75,
        "base_risk_level": "high",
        "latitude": 29.7604,
        "longitude": -95.3698,
        "region": "Houston",
        "year_built": 2000,
        "loan_type": "30-year fixed",
        "interest_rate": 4.5,
        "monthly_payment": 1425,
        "insurance_coverage": 350_000,
    },
    {
        "id": "L005",
        "address": "654 Travis St, Houston, TX",
        "value": 290_000,
        "balance": 203_000,
        "ltv": 0.70,
        "base_risk_level": "medium",
        "latitude": 29.7633,
        "longitude": -95.3633,
        "region": "Houston",
        "year_built": 2008,
        "loan_type": "30-year fixed",
        "interest_rate": 4.0,
        "monthly_payment": 970,
        "insurance_coverage": 275_000,
    },
    # New York
    {
        "id": "L006",
        "address": "876 Broadway, New York, NY",
        "value": 920_000,
        "balance": 717_600,
        "ltv": 0.78,
        "base_risk_level": "medium",
        "latitude": 40.7128,
        "longitude": -74.0060,
        "region": "NewYork",
        "year_built": 1985,
        "loan_type": "30-year fixed",
        "interest_rate": 3.9,
        "monthly_payment": 3385,
        "insurance_coverage": 900_000,
    },
    # San Francisco
    {
        "id": "L007",
        "address": "987 Market St, San Francisco, CA",
        "value": 850_000,
        "balance": 680_000,
        "ltv": 0.80,
        "base_risk_level": "medium",
        "latitude": 37.7749,
        "longitude": -122.4194,
        "region": "SanFrancisco",
        "year_built": 1995,
        "loan_type": "30-year fixed",
        "interest_rate": 3.7,
        "monthly_payment": 3130,
        "insurance_coverage": 800_000,
    },
    # New Orleans
    {
        "id": "L008",
        "address": "234 Canal St, New Orleans, LA",
        "value": 310_000,
        "balance": 223_200,
        "ltv": 0.72,
        "base_risk_level": "high",
        "latitude": 29.9511,
        "longitude": -90.0715,
        "region": "NewOrleans",
        "year_built": 2002,
        "loan_type": "30-year fixed",
        "interest_rate": 4.3,
        "monthly_payment": 1105,
        "insurance_coverage": 300_000,
    },
]

# Radius in metres, expected loss in USD, at present-day conditions.
RISK_ZONES = [
    # Miami
    {"id": 1, "latitude": 25.77, "longitude": -80.20, "base_risk_level": "high", "base_radius_meters": 500, "hazard_type": "flood", "region": "Miami", "base_affected_properties": 12, "base_expected_loss": 2_500_000},
    {"id": 2, "latitude": 25.76, "longitude": -80.21, "base_risk_level": "medium", "base_radius_meters": 700, "hazard_type": "flood", "region": "Miami", "base_affected_properties": 8, "base_expected_loss": 1_200_000},
    {"id": 3, "latitude": 25.78, "longitude": -80.19, "base_risk_level": "high", "base_radius_meters": 400, "hazard_type": "wind", "region": "Miami", "base_affected_properties": 10, "base_expected_loss": 1_800_000},
    {"id": 4, "latitude": 25.75, "longitude": -80.22, "base_risk_level": "medium", "base_radius_meters": 600, "hazard_type": "fire", "region": "Miami", "base_affected_properties": 6, "base_expected_loss": 950_000},
    {"id": 5, "latitude": 25.79, "longitude": -80.18, "base_risk_level": "high", "base_radius_meters": 450, "hazard_type": "heat", "region": "Miami", "base_affected_properties": 9, "base_expected_loss": 1_400_000},
    # Houston
    {"id": 6, "latitude": 29.76, "longitude": -95.37, "base_risk_level": "high", "base_radius_meters": 600, "hazard_type": "flood", "region": "Houston", "base_affected_properties": 15, "base_expected_loss": 3_200_000},
    {"id": 7, "latitude": 29.75, "longitude": -95.38, "base_risk_level": "medium", "base_radius_meters": 800, "hazard_type": "wind", "region": "Houston", "base_affected_properties": 11, "base_expected_loss": 1_700_000},
    {"id": 8, "latitude": 29.77, "longitude": -95.36, "base_risk_level": "high", "base_radius_meters": 500, "hazard_type": "fire", "region": "Houston", "base_affected_properties": 8, "base_expected_loss": 2_100_000},
    {"id": 9, "latitude": 29.74, "longitude": -95.39, "base_risk_level": "medium", "base_radius_meters": 700, "hazard_type": "heat", "region": "Houston", "base_affected_properties": 7, "base_expected_loss": 1_100_000},
    # New Orleans
    {"id": 10, "latitude": 29.95, "longitude": -90.07, "base_risk_level": "high", "base_radius_meters": 550, "hazard_type": "flood", "region": "NewOrleans", "base_affected_properties": 14, "base_expected_loss": 2_800_000},
    {"id": 11, "latitude": 29.96, "longitude": -90.06, "base_risk_level": "medium", "base_radius_meters": 650, "hazard_type": "wind", "region": "NewOrleans", "base_affected_properties": 9, "base_expected_loss": 1_500_000},
    # New York
    {"id": 12, "latitude": 40.71, "longitude": -74.00, "base_risk_level": "medium", "base_radius_meters": 500, "hazard_type": "flood", "region": "NewYork", "base_affected_properties": 18, "base_expected_loss": 4_200_000},
    {"id": 13, "latitude": 40.72, "longitude": -73.99, "base_risk_level": "high", "base_radius_meters": 450, "hazard_type": "wind", "region": "NewYork", "base_affected_properties": 12, "base_expected_loss": 3_800_000},
    # San Francisco
    {"id": 14, "latitude": 37.77, "longitude": -122.41, "base_risk_level": "low", "base_radius_meters": 400, "hazard_type": "fire", "region": "SanFrancisco", "base_affected_properties": 6, "base_expected_loss": 1_900_000},
    {"id": 15, "latitude": 37.78, "longitude": -122.40, "base_risk_level": "medium", "base_radius_meters": 500, "hazard_type": "flood", "region": "SanFrancisco", "base_affected_properties": 10, "base_expected_loss": 2_700_000},
]
