from .loader import load_tokens_from_json, resolve_token_css

__all__ = ["load_tokens_from_json", "resolve_token_css"]
