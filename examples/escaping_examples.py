#!/usr/bin/env python3
"""
Markup Escaping Examples

This script demonstrates the named escaping functions, the Escaper class with
statistics, and custom escapers built with get_escaper.
"""

import logging
import sys
from pathlib import Path

# Add src to path for running examples directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markup_escaper import (
    ConfigValidationError,
    Escaper,
    EscaperConfig,
    encode_xml,
    escape_attribute,
    escape_text,
    escape_utf8,
    get_escaper,
)


def example_named_functions():
    """Example 1: The four named escaping functions."""
    print("=== Example 1: Named Functions ===")

    sample = "Café <b>\"open\"</b> & it's late \U0001F600"
    print(f"encode_xml:       {encode_xml(sample)}")
    print(f"escape_utf8:      {escape_utf8(sample)}")
    print(f"escape_text:      {escape_text(sample)}")
    print(f"escape_attribute: {escape_attribute(sample)}")
    print()


def example_statistics():
    """Example 2: Escaping with statistics."""
    print("=== Example 2: Statistics ===")

    escaper = Escaper(EscaperConfig.create_preset("xml"), correlation_id="demo")
    result = escaper.escape_with_result("naïve <café> 😀")
    stats = result.statistics
    print(f"Text: {result.text}")
    print(f"Named replacements: {stats.named_replacements}")
    print(f"Numeric references: {stats.numeric_references}")
    print(f"Surrogate pairs: {stats.surrogate_pairs}")
    print(f"Replacement rate: {stats.replacement_rate:.2f}")
    print()


def example_custom_escaper():
    """Example 3: Custom escapers and configuration errors."""
    print("=== Example 3: Custom Escaper ===")

    escape_template = get_escaper(r"[{}&]", {0x7B: "&#x7b;", 0x7D: "&#x7d;", 0x26: "&amp;"})
    print(f"Template-safe: {escape_template('{{ user }} & co')}")

    try:
        get_escaper(r"[<>]", {0x3C: "&lt;"})
    except ConfigValidationError as e:
        print(f"Rejected configuration: {e}")
        for suggestion in e.suggestions:
            print(f"  - {suggestion}")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(component)s %(message)s")
    example_named_functions()
    example_statistics()
    example_custom_escaper()
