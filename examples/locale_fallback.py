"""LocaleProviderAdapter Example - CLDR Fallback Chains.

Demonstrates how candidate chains follow CLDR irregular parent locales
instead of plain tag truncation.

Scenarios covered:
1. Latin American Spanish (es-AR → es-419 → es → root)
2. Traditional Chinese (zh-Hant-TW → zh-Hant → root, skipping zh)
3. In-memory metadata for tests and custom deployments
4. Provider support checks with equivalent locales
5. Resolving a resource against the candidate chain

Python 3.13+.
"""

from __future__ import annotations

from localechain import (
    AdapterConfig,
    LocaleCategory,
    LocaleProviderAdapter,
    LocaleTag,
    StaticMetadataSource,
)


def _show(chain: list[LocaleTag]) -> str:
    return " → ".join(tag.to_language_tag() for tag in chain)


def example_1_latin_american_spanish(adapter: LocaleProviderAdapter) -> None:
    """Example 1: Regional parent inserted between es-AR and es."""
    print("=" * 60)
    print("Example 1: Latin American Spanish")
    print("=" * 60)

    for identifier in ("es-AR", "es-MX", "es-ES"):
        chain = adapter.get_candidate_locales("messages", identifier)
        print(f"  {identifier}: {_show(chain)}")


def example_2_traditional_chinese(adapter: LocaleProviderAdapter) -> None:
    """Example 2: zh-Hant falls back to root, never to Simplified zh."""
    print("\n" + "=" * 60)
    print("Example 2: Traditional Chinese")
    print("=" * 60)

    for identifier in ("zh-Hant-TW", "zh-Hant", "zh-Hans-CN"):
        chain = adapter.get_candidate_locales("messages", identifier)
        print(f"  {identifier}: {_show(chain)}")


def example_3_static_metadata() -> None:
    """Example 3: In-memory metadata instead of Babel's CLDR data."""
    print("\n" + "=" * 60)
    print("Example 3: Static Metadata")
    print("=" * 60)

    base = StaticMetadataSource(
        tags={"AvailableLocales": "en en-GB lv lt"},
        parents={"lv": ["lt-LT"]},
    )
    adapter = LocaleProviderAdapter(base, config=AdapterConfig(discover_extension=False))

    print(f"  available: {[tag.to_language_tag() for tag in adapter.get_available_locales()]}")
    print(f"  lt-LT: {_show(adapter.get_candidate_locales('messages', 'lt-LT'))}")
    print(f"  en-GB: {_show(adapter.get_candidate_locales('messages', 'en-GB'))}")


def example_4_support_checks(adapter: LocaleProviderAdapter) -> None:
    """Example 4: Support checks honor equivalent locales."""
    print("\n" + "=" * 60)
    print("Example 4: Provider Support")
    print("=" * 60)

    declared = frozenset({"nb", "zh-Hant-HK"})
    for identifier in ("no-NO", "zh-HK", "th-TH-u-nu-thai", "und", "fr"):
        supported = adapter.is_supported_provider_locale(identifier, declared)
        status = "[OK]" if supported else "[--]"
        print(f"  {identifier}: {status}")

    format_tags = adapter.create_language_tag_set(LocaleCategory.FORMAT_DATA)
    print(f"\n  CLDR format data covers {len(format_tags)} locales")


def example_5_resource_lookup(adapter: LocaleProviderAdapter) -> None:
    """Example 5: First candidate with a bundle wins."""
    print("\n" + "=" * 60)
    print("Example 5: Resource Lookup")
    print("=" * 60)

    bundles = {
        "es-419": {"cart": "Carrito"},
        "es": {"cart": "Cesta", "checkout": "Pagar"},
        "und": {"cart": "Cart", "checkout": "Checkout", "help": "Help"},
    }

    chain = adapter.get_candidate_locales("shop", "es-AR")
    for key in ("cart", "checkout", "help"):
        for tag in chain:
            bundle = bundles.get(tag.to_language_tag(), {})
            if key in bundle:
                print(f"  {key}: {bundle[key]} (from {tag.to_language_tag()})")
                break


if __name__ == "__main__":
    cldr = LocaleProviderAdapter(config=AdapterConfig(discover_extension=False))

    example_1_latin_american_spanish(cldr)
    example_2_traditional_chinese(cldr)
    example_3_static_metadata()
    example_4_support_checks(cldr)
    example_5_resource_lookup(cldr)

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
