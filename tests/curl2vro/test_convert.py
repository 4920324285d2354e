import os
from unittest import mock

import pytest

from curl2vro import (
    ConversionError,
    ConvertOptions,
    NoURLError,
    RequestDescriptor,
    convert,
    output_filename,
)
from curl2vro.config import OUTPUT_DIR_ENVVAR

RAW = "curl -X POST https://api.example.com/v1/users -H 'Content-Type: application/json' -d '{\"name\":\"John\"}'"


@pytest.mark.parametrize(
    "url,method,filename",
    [
        ("https://api.example.com/v1/users", "POST", "api.example.com_v1_users_POST.js"),
        ("https://api.sampleapis.com/coffee/hot", "GET", "api.sampleapis.com_coffee_hot_GET.js"),
        ("https://example.com", "GET", "example.com__GET.js"),
        ("https://example.com/a?b=1", "DELETE", "example.com_a_DELETE.js"),
        ("https://example.com:8443/a:b*c", "PUT", "example.com_a_b_c_PUT.js"),
    ],
)
def test_output_filename(url, method, filename):
    assert output_filename(RequestDescriptor(url, method)) == filename


def test_output_filename_invalid_url():
    with pytest.raises(ValueError):
        output_filename(RequestDescriptor("example.com"))


def test_convert():
    script = convert(RAW)
    assert 'createRequest("POST", "/v1/users", JSON.stringify({"name":"John"}));' in script
    assert script.endswith(RAW + "\n*/")


def test_convert_write_to_file(tmp_path):
    options = ConvertOptions(write_to_file=True, output_dir=str(tmp_path))
    script = convert(RAW, options)

    path = tmp_path / "api.example.com_v1_users_POST.js"
    assert path.read_text(encoding="utf-8") == script


def test_convert_write_to_envvar_dir(tmp_path):
    with mock.patch.dict(os.environ, {OUTPUT_DIR_ENVVAR: str(tmp_path)}):
        script = convert("curl https://example.com/data", ConvertOptions(write_to_file=True))

    path = tmp_path / "example.com_data_GET.js"
    assert path.read_text(encoding="utf-8") == script


def test_convert_error_writes_nothing(tmp_path):
    options = ConvertOptions(write_to_file=True, output_dir=str(tmp_path))
    with pytest.raises(NoURLError):
        convert("curl -O www.haxx.se/index.html -O curl.se/download.html", options)
    assert list(tmp_path.iterdir()) == []


def test_convert_errors_share_a_base_class():
    with pytest.raises(ConversionError):
        convert("curl")
