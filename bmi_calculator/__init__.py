from bmi_calculator.classifier import BmiResult, Category, categorize, classify, compute_bmi
from bmi_calculator.errors import BmiCalculatorError, InputStreamError, InvalidInputError
from bmi_calculator.prompt import ask, ask_question, parse_float

__all__ = [
    "BmiResult",
    "Category",
    "categorize",
    "classify",
    "compute_bmi",
    "ask",
    "ask_question",
    "parse_float",
    "BmiCalculatorError",
    "InputStreamError",
    "InvalidInputError",
]
