import sys

from loguru import logger

from bmi_calculator.classifier import classify
from bmi_calculator.config import DEFAULT_LOG_LEVEL, get_settings
from bmi_calculator.errors import InputStreamError
from bmi_calculator.prompt import ask, parse_float

BANNER = "BMI Calculator\n=============="
HEIGHT_QUESTION = "What is your height? in METRES please, none of that imperial crap"
WEIGHT_QUESTION = "What is your weight? In Kilograms!"
STREAM_FAILURE = "Oops! Looks like there be a sea monster in the I/O waters."


def configure_logging(level: str) -> None:
    # stdout belongs to the conversation with the user
    logger.remove()
    try:
        logger.add(sys.stderr, level=level)
    except ValueError:
        logger.add(sys.stderr, level=DEFAULT_LOG_LEVEL)
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")


def run() -> None:
    print(BANNER)
    height = ask(HEIGHT_QUESTION, parse_float)
    weight = ask(WEIGHT_QUESTION, parse_float)
    result = classify(weight, height)
    logger.info(f"BMI {result.bmi} classified as {result.category.value}")
    print(result.message())


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        run()
    except InputStreamError as e:
        logger.error(f"Input failed: {e}")
        print(STREAM_FAILURE, flush=True)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
