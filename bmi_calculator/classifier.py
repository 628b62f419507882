"""
BMI computation and classification.

BMI = weight_kg / (height_m)², mapped onto four ordered bands.
Inputs are not range-checked: zero, negative and NaN values flow through
the computation and land in whichever band their comparisons select.
"""
import math
from dataclasses import dataclass
from enum import Enum


OBESE_THRESHOLD = 30.0
OVERWEIGHT_THRESHOLD = 25.0
NORMAL_THRESHOLD = 18.5


class Category(str, Enum):
    OBESE = "obese"
    OVERWEIGHT = "overweight"
    NORMAL = "normal"
    UNDERWEIGHT = "underweight"

    @property
    def sentence(self) -> str:
        return _SENTENCES[self]


_SENTENCES = {
    Category.OBESE: "According to these numbers, you are obese...",
    Category.OVERWEIGHT: "You are overweight...",
    Category.NORMAL: "You are normal",
    Category.UNDERWEIGHT: "You are underweight",
}


def compute_bmi(height: float, weight: float) -> float:
    """
    Calculate BMI given height in metres and weight in kilograms.

    A zero height gives ``inf`` (or ``nan`` when the weight is zero too)
    rather than raising.
    """
    denominator = height * height
    if denominator == 0:
        if weight == 0 or math.isnan(weight):
            return math.nan
        return math.inf if weight > 0 else -math.inf
    return weight / denominator


def categorize(bmi: float) -> Category:
    # NaN fails every comparison and falls through to underweight
    if bmi >= OBESE_THRESHOLD:
        return Category.OBESE
    if OVERWEIGHT_THRESHOLD <= bmi < OBESE_THRESHOLD:
        return Category.OVERWEIGHT
    if NORMAL_THRESHOLD <= bmi < OVERWEIGHT_THRESHOLD:
        return Category.NORMAL
    return Category.UNDERWEIGHT


@dataclass(frozen=True)
class BmiResult:
    bmi: float
    category: Category

    def message(self) -> str:
        return f"Your BMI is {self.bmi:.2f}. {self.category.sentence}"


def classify(weight: float, height: float) -> BmiResult:
    bmi = compute_bmi(height, weight)
    return BmiResult(bmi=bmi, category=categorize(bmi))
