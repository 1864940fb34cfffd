import logging

from app.server import CERT_FILE, KEY_FILE, resolve_ssl_options


def test_plain_http_without_certs(tmp_path):
    assert resolve_ssl_options(False, tmp_path) == {}


def test_https_requested_but_certs_missing(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert resolve_ssl_options(True, tmp_path) == {}
    assert "falling back to HTTP" in caplog.text


def test_unloadable_certs_fall_back_to_http(tmp_path):
    (tmp_path / KEY_FILE).write_text("not a key")
    (tmp_path / CERT_FILE).write_text("not a certificate")
    assert resolve_ssl_options(False, tmp_path) == {}
