from __future__ import annotations

import pytest

from gstr1.reference.hsn import (
    DEFAULT_DESCRIPTION,
    SERVICES_DESCRIPTION,
    clean_code,
    get_hsn_description,
    get_hsn_gst_rate,
    get_hsn_hierarchy,
    is_service_code,
    is_valid_hsn_code,
    search_hsn_by_description,
)


def test_tariff_item_exact_match():
    assert get_hsn_description("84713010") == "Personal computers (laptops, notebooks)"


def test_unknown_tariff_falls_back_to_subheading_then_heading():
    # 84713099 is not a tariff item, its 6-digit sub-heading is
    assert get_hsn_description("84713099") == "Portable automatic data processing machines (laptops)"
    assert get_hsn_description("847199") == "Automatic data processing machines and units thereof"


def test_chapter_fallback_and_default():
    assert get_hsn_description("8499") == "Nuclear reactors, boilers, machinery and mechanical appliances"
    assert get_hsn_description(None) == DEFAULT_DESCRIPTION
    assert get_hsn_description("") == DEFAULT_DESCRIPTION


def test_service_codes():
    assert get_hsn_description("998314") == "Information technology design and development services"
    assert get_hsn_description("998398") == "Other professional, technical and business services"
    assert get_hsn_description("990000") == SERVICES_DESCRIPTION
    assert is_service_code("996511")
    assert not is_service_code("8471")


def test_clean_code_strips_noise():
    assert clean_code(8471.0) == "8471"
    assert clean_code(" 8471-30 10 ") == "84713010"
    assert clean_code(None) == ""


def test_gst_rate_lookup():
    assert get_hsn_gst_rate("84713010") == 18
    assert get_hsn_gst_rate("996511") == 5
    # services without any rate still default to 18
    assert get_hsn_gst_rate("990000") == 18
    assert get_hsn_gst_rate("") is None


def test_hierarchy_levels():
    h = get_hsn_hierarchy("84713010")
    assert h["chapter"]["code"] == "84"
    assert h["heading"]["code"] == "8471"
    assert h["subheading"]["code"] == "847130"
    assert h["tariff"]["description"] == "Personal computers (laptops, notebooks)"
    assert h["gst_rate"] == 18
    assert get_hsn_hierarchy("") == {}


@pytest.mark.parametrize(
    "code,expected",
    [("84", True), ("8471", True), ("9", False), ("998314", True), ("9900", False)],
)
def test_is_valid_hsn_code(code, expected):
    assert is_valid_hsn_code(code) is expected


def test_search_by_description():
    results = search_hsn_by_description("bearings")
    assert any(r.code == "8482" for r in results)
    assert len(search_hsn_by_description("e", limit=3)) == 3
