"""Body Mass Index calculator"""

from decimal import Decimal

from toolhub.domain.exceptions import InvalidArgumentError
from toolhub.domain.models import BmiResult
from toolhub.domain.money import Numeric, round2, to_decimal


def classify_bmi(bmi: Decimal) -> str:
    """
    Map a BMI value to its category.

    Bands: < 18.5 Underweight, <= 24.9 Normal weight, <= 29.9 Overweight,
    anything above Obese. Values in the gaps (24.9-25, 29.9-30) land in the
    higher band.
    """
    if bmi < Decimal("18.5"):
        return "Underweight"
    elif bmi <= Decimal("24.9"):
        return "Normal weight"
    elif bmi <= Decimal("29.9"):
        return "Overweight"
    else:
        return "Obese"


def calculate_bmi(weight_kg: Numeric, height_cm: Numeric) -> BmiResult:
    weight = to_decimal(weight_kg)
    height = to_decimal(height_cm)
    if weight <= 0 or height <= 0:
        raise InvalidArgumentError("Weight and height must be positive values")

    height_m = height / 100
    bmi = round2(weight / (height_m * height_m))

    return BmiResult(bmi=bmi, category=classify_bmi(bmi), weight_kg=weight, height_cm=height)
