#!/usr/bin/env python3
"""
Quick Start Guide for GlyphForge.

This example walks through the progressive API: simple functions, the
configured engine, batches and the JSON tool adapter.
"""

import json
import random

from glyphforge import (
    EngineConfig,
    TextStyler,
    call_tool,
    list_styles,
    revert,
    transform,
    transform_all,
)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - GlyphForge")
    print("=" * 45)

    # Step 1: Single styles
    print("\n✍️  Step 1: Styling Text")
    print("-" * 30)

    for style in ("bold", "script", "fraktur", "circled", "upsideDown", "morse"):
        print(f"{style:>12}: {transform('Hello World', style)}")

    # Step 2: Discover styles
    print("\n📚 Step 2: Available Styles")
    print("-" * 30)

    styles = list_styles()
    print(f"✅ {len(styles)} styles available")
    for info in styles[:5]:
        print(f"  - {info.name}: {info.example} ({info.description})")

    # Step 3: Every style at once
    print("\n🎨 Step 3: All Styles")
    print("-" * 30)

    results = transform_all("Hi")
    print(f"✅ Rendered {len(results)} styles; vaporwave: {results['vaporwave']}")

    # Step 4: Configured engine with reproducible zalgo
    print("\n⚙️  Step 4: Configured Engine")
    print("-" * 30)

    styler = TextStyler(
        config=EngineConfig.performance_optimized(),
        rng=random.Random(2024),
    )
    print(f"zalgo (maxi): {styler.transform('Hello', 'zalgo', 'maxi')}")

    batch = styler.batch_transform([
        {"text": "Hello", "style": "bold"},
        {"text": "Hello", "style": "not-a-style"},
    ])
    print(f"✅ Batch: {batch.successful}/{batch.total_items} successful")
    for failure in batch.failures:
        print(f"  ✗ item {failure.index}: {failure.error}")

    # Step 5: Reverting styled text
    print("\n↩️  Step 5: Revert")
    print("-" * 30)

    styled = transform("Hello World", "doubleStruck")
    print(f"{styled} -> {revert(styled, 'doubleStruck')}")

    # Step 6: Tool adapter
    print("\n🔧 Step 6: JSON Tools")
    print("-" * 30)

    response = call_tool("transform_text", {"text": "Hello", "style": "squared"})
    print(json.loads(response["content"][0]["text"]))


if __name__ == "__main__":
    quick_start_example()
