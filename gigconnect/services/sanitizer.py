"""
Markup stripping for user-supplied free text.
"""
import nh3


def strip_markup(text: str) -> str:
    """
    Remove every tag and attribute, keeping only the text content.
    Script and style elements are dropped together with their content.
    """
    return nh3.clean(str(text), tags=set(), attributes={})
