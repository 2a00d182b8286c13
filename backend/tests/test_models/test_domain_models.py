"""Tests for domain record parsing and validation."""

import math

import pytest

from app.exceptions import DataUnavailableError, InvalidInputError, RiskEngineError
from app.models.hazard import HazardType, RiskLevel, RiskZone, parse_hazard_type
from app.models.portfolio import Loan
from app.models.scenario import ScenarioParameters, Timeframe, intensity_label
from app.models.weather import (
    AlertCategory,
    WeatherAlert,
    WeatherCondition,
    WeatherObservation,
    classify_alert_event,
)


class TestTimeframe:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("present", Timeframe.PRESENT),
            ("Present", Timeframe.PRESENT),
            (2023, Timeframe.PRESENT),
            ("2050", Timeframe.MID_CENTURY),
            (2100, Timeframe.END_CENTURY),
            (Timeframe.END_CENTURY, Timeframe.END_CENTURY),
        ],
    )
    def test_parse(self, value, expected):
        assert Timeframe.parse(value) is expected

    @pytest.mark.parametrize("value", [2030, "2075", "future", "", True, 2050.0])
    def test_unknown_timeframe(self, value):
        with pytest.raises(InvalidInputError):
            Timeframe.parse(value)

    def test_labels(self):
        assert Timeframe.MID_CENTURY.label == "Mid-century (2050)"


class TestScenarioParameters:
    def test_defaults(self):
        params = ScenarioParameters(hazard_type="flood")
        assert params.return_period_years == 100
        assert params.intensity == 3.0
        assert params.timeframe is Timeframe.PRESENT

    def test_unsupported_return_period(self):
        with pytest.raises(InvalidInputError):
            ScenarioParameters(hazard_type="flood", return_period_years=25)

    @pytest.mark.parametrize("intensity", [-1, 5.5, math.nan])
    def test_intensity_out_of_range(self, intensity):
        with pytest.raises(InvalidInputError):
            ScenarioParameters(hazard_type="flood", intensity=intensity)

    def test_unknown_hazard(self):
        with pytest.raises(InvalidInputError):
            ScenarioParameters(hazard_type="earthquake")


class TestIntensityLabel:
    @pytest.mark.parametrize(
        "intensity, label",
        [(0, "Minor"), (1, "Minor"), (1.5, "Moderate"), (3, "Significant"), (4, "Severe"), (4.5, "Extreme")],
    )
    def test_labels(self, intensity, label):
        assert intensity_label(intensity) == label


class TestAlertClassification:
    @pytest.mark.parametrize(
        "event, categories",
        [
            ("Flood", {AlertCategory.FLOOD}),
            ("Coastal Flooding Advisory", {AlertCategory.FLOOD}),
            ("Hurricane Warning", {AlertCategory.HURRICANE}),
            ("Tornado Watch", {AlertCategory.TORNADO}),
            ("Severe Storm Flood Warning", {AlertCategory.STORM, AlertCategory.FLOOD}),
            ("Severe Thunderstorm", set()),
            ("Heat Advisory", set()),
        ],
    )
    def test_classify(self, event, categories):
        assert classify_alert_event(event) == frozenset(categories)

    def test_explicit_categories_kept(self):
        alert = WeatherAlert(event="Coastal Warning", categories={AlertCategory.HURRICANE})
        assert alert.categories == frozenset({AlertCategory.HURRICANE})


class TestWeatherObservation:
    def test_condition_label_normalized(self):
        obs = WeatherObservation(condition="rain", temperature_c=20, humidity_pct=50, wind_speed_mps=3)
        assert obs.condition is WeatherCondition.RAIN

    def test_unknown_condition_is_other(self):
        obs = WeatherObservation(condition="Sandstorm", temperature_c=35, humidity_pct=5, wind_speed_mps=9)
        assert obs.condition is WeatherCondition.OTHER

    def test_negative_precipitation_rejected(self):
        with pytest.raises(InvalidInputError):
            WeatherObservation(
                condition="Rain",
                temperature_c=20,
                humidity_pct=50,
                wind_speed_mps=3,
                precipitation_mm_per_hour=-1,
            )

    def test_non_finite_temperature_rejected(self):
        with pytest.raises(InvalidInputError):
            WeatherObservation(condition="Clear", temperature_c=math.inf, humidity_pct=50, wind_speed_mps=3)


class TestReferenceRecords:
    def test_loan_parses_risk_level(self):
        loan = Loan(id="X", address="1 Main St", value=1, balance=1, ltv=1, region="Miami", base_risk_level="HIGH")
        assert loan.base_risk_level is RiskLevel.HIGH

    def test_loan_negative_value_rejected(self):
        with pytest.raises(InvalidInputError):
            Loan(id="X", address="1 Main St", value=-1, balance=0, ltv=0, region="Miami", base_risk_level="low")

    def test_zone_validation(self):
        with pytest.raises(InvalidInputError):
            RiskZone(
                id=99,
                region="Miami",
                hazard_type="flood",
                base_risk_level="low",
                base_radius_meters=100,
                base_expected_loss=1,
                base_affected_properties=-2,
            )

    def test_parse_hazard_type(self):
        assert parse_hazard_type(" Heat ") is HazardType.HEAT


class TestErrorHierarchy:
    def test_invalid_input_is_value_error(self):
        assert issubclass(InvalidInputError, ValueError)
        assert issubclass(InvalidInputError, RiskEngineError)

    def test_data_unavailable_is_lookup_error(self):
        assert issubclass(DataUnavailableError, LookupError)
        assert issubclass(DataUnavailableError, RiskEngineError)
