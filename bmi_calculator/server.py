import math
from typing import Optional

from loguru import logger
from mcp.server.fastmcp import FastMCP

from bmi_calculator.classifier import classify, compute_bmi
from bmi_calculator.config import get_settings

mcp = FastMCP(get_settings().server_name)


def _json_number(value: float, digits: Optional[int] = None) -> Optional[float]:
    # inf and nan have no JSON representation
    if not math.isfinite(value):
        return None
    return value if digits is None else round(value, digits)


@mcp.tool()
def calculate_bmi(weight_kg: float, height_m: float) -> Optional[float]:
    """
    Calculate BMI given weight in kg and height in meters.
    Returns null when the BMI is not a finite number (for example zero height).
    """
    logger.info("Client is running the calculate_bmi tool")
    return _json_number(compute_bmi(height_m, weight_kg))


@mcp.tool()
def classify_bmi(weight_kg: float, height_m: float) -> dict:
    """
    Calculate BMI given weight in kg and height in meters and classify it as
    obese, overweight, normal or underweight.
    """
    logger.info("Client is running the classify_bmi tool")
    result = classify(weight_kg, height_m)
    return {
        "bmi": _json_number(result.bmi, 2),
        "category": result.category.value,
        "message": result.message(),
    }


def main() -> None:
    logger.info(f"Starting server {mcp.name}")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
