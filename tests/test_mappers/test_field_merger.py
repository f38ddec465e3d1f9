from app.mappers.field_merger import first_non_empty, merge_extractions
from app.schemas.website import FieldExtraction, Platform


def test_homepage_values_win():
    home = FieldExtraction(name="Acme", about="Home about", email="home@acme.in")
    deep = [FieldExtraction(name="About Acme", about="Deep about", email="deep@acme.in")]

    merged = merge_extractions(home, deep)

    assert merged.name == "Acme"
    assert merged.about == "Home about"
    assert merged.email == "home@acme.in"


def test_first_deep_page_fills_missing_about():
    home = FieldExtraction(name="Acme")
    deep = [
        FieldExtraction(about="First deep about"),
        FieldExtraction(about="Second deep about"),
    ]

    merged = merge_extractions(home, deep)

    assert merged.about == "First deep about"


def test_fields_fill_independently():
    home = FieldExtraction()
    deep = [
        FieldExtraction(email="contact@acme.in"),
        FieldExtraction(location="12 MG Road, Bengaluru 560001", email="other@acme.in"),
    ]

    merged = merge_extractions(home, deep)

    assert merged.email == "contact@acme.in"
    assert merged.location == "12 MG Road, Bengaluru 560001"
    assert merged.about is None


def test_name_from_deep_page_when_homepage_has_none():
    merged = merge_extractions(FieldExtraction(), [FieldExtraction(name="Acme | About")])
    assert merged.name == "Acme | About"


def test_homepage_phones_kept():
    home = FieldExtraction(phones=["+918123456789"])
    deep = [FieldExtraction(phones=["+919876543210"])]

    merged = merge_extractions(home, deep)

    assert merged.phones == ["+918123456789"]


def test_first_non_empty_phone_set_replaces_whole_set():
    home = FieldExtraction(phones=[])
    deep = [
        FieldExtraction(phones=[]),
        FieldExtraction(phones=["+919876543210"]),
        FieldExtraction(phones=["+911111111111"]),
    ]

    merged = merge_extractions(home, deep)

    assert merged.phones == ["+919876543210"]


def test_socials_and_platform_only_from_homepage():
    home = FieldExtraction(platform=Platform.unknown)
    deep = [
        FieldExtraction(
            socials={"instagram": "https://instagram.com/acme"},
            platform=Platform.shopify,
        )
    ]

    merged = merge_extractions(home, deep)

    assert merged.socials == {}
    assert merged.platform == Platform.unknown


def test_no_deep_pages():
    home = FieldExtraction(
        name="Acme",
        socials={"facebook": "https://facebook.com/acme"},
        platform=Platform.shopify,
    )

    merged = merge_extractions(home)

    assert merged.name == "Acme"
    assert merged.socials == {"facebook": "https://facebook.com/acme"}
    assert merged.platform == Platform.shopify
    assert merged.phones == []


def test_first_non_empty_skips_blank_strings():
    assert first_non_empty([None, "  ", "value", "later"]) == "value"
