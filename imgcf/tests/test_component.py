import pytest
from pydantic import ValidationError

from imgcf.component import img_cf
from imgcf.config import Settings
from imgcf.errors import InvalidDimensionError
from imgcf.models import ImageAttributes


def test_img_cf_passthrough_when_disabled():
    html = img_cf(src="/images/foobar.png", width="400", cf={"retina": False})

    assert html == '<img src="/images/foobar.png" width="400" />'


def test_img_cf_rewrites_when_enabled(rewrite_enabled):
    html = img_cf(src="/images/foobar.png", width="400")

    # The html width attribute is kept, the CDN options are set.
    assert 'width="400"' in html
    assert "width=400" in html
    assert "width=800" in html
    assert 'srcset="/cdn-cgi/image/format=auto,fit=crop,sharpen=1,width=800/images/foobar.png 2x"' in html


def test_img_cf_accepts_mapping_and_explicit_settings():
    html = img_cf(
        {"src": "/a.png", "alt": "A", "class": "thumb"},
        settings=Settings(rewrite_urls=True),
        cf={"retina": False},
    )

    assert html == (
        '<img src="/cdn-cgi/image/format=auto,fit=crop,sharpen=1/a.png" alt="A" class="thumb" />'
    )


def test_img_cf_keywords_override_mapping():
    html = img_cf({"src": "/a.png", "alt": "old"}, alt="new")

    assert 'alt="new"' in html


def test_img_cf_accepts_image_attributes():
    tag = ImageAttributes.model_validate({"src": "/a.png", "height": 50, "cf": {"retina": False}})

    html = img_cf(tag, settings=Settings(rewrite_urls=True))

    assert html == '<img src="/cdn-cgi/image/format=auto,fit=crop,sharpen=1,height=50/a.png" height="50" />'


@pytest.mark.parametrize("value", [True, False, 4.0, 4.5])
def test_img_cf_rejects_non_integer_width(value):
    with pytest.raises(InvalidDimensionError) as excinfo:
        img_cf(src="/a.png", width=value, settings=Settings(rewrite_urls=True))

    assert excinfo.value.field == "width"
    assert excinfo.value.value is value


def test_img_cf_rejects_float_height_when_disabled():
    with pytest.raises(InvalidDimensionError) as excinfo:
        img_cf(src="/a.png", height=4.0)

    assert excinfo.value.field == "height"


@pytest.mark.parametrize("value", [True, 4.0])
def test_image_attributes_keep_dimension_types_strict(value):
    with pytest.raises(ValidationError):
        ImageAttributes.model_validate({"src": "/a.png", "width": value})
