import json

from ..color import normalize_hex_color
from ..theme.models import NEUTRAL_TOKEN

# The neutral bubble is drawn with the foreground color
NEUTRAL_CSS_TOKEN = "fg"


def load_tokens_from_json(json_path):
    """Load a design-token table mapping token names to CSS colors.

    Args:
        json_path: Path to token JSON file

    Returns:
        dict: token name -> CSS color string (hex values normalized)
    """
    with open(json_path) as f:
        data = json.load(f)

    tokens = {}
    for key, value in data.items():
        # Skip metadata keys
        if key.startswith("_"):
            continue
        if not isinstance(value, str):
            continue
        tokens[key] = normalize_hex_color(value) or value.strip()

    return tokens


def resolve_token_css(token, tokens):
    """CSS color for a bubble color token, "" if the table lacks it."""
    if token == NEUTRAL_TOKEN:
        token = NEUTRAL_CSS_TOKEN
    return tokens.get(token, "")
