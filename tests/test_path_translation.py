"""Tests for mapping request URIs onto the document root."""

from pathlib import Path

from urlspell.host import decode_wsgi_path, normalize_uri_path, translate_request_path


class TestDecodeWsgiPath:
    """Test reinterpretation of WSGI latin-1 path strings."""

    def test_ascii_unchanged(self) -> None:
        assert decode_wsgi_path("/doc/index.html") == "/doc/index.html"

    def test_utf8_bytes(self) -> None:
        wsgi_value = "/doc/caf\u00e9.html".encode("utf-8").decode("latin-1")

        assert decode_wsgi_path(wsgi_value) == "/doc/caf\u00e9.html"

    def test_invalid_utf8_kept_as_surrogates(self) -> None:
        """Undecodable bytes survive a round trip to the filesystem encoding."""
        decoded = decode_wsgi_path("/doc/\xff.html")

        assert decoded.encode("utf-8", "surrogateescape") == b"/doc/\xff.html"


class TestNormalizeUriPath:
    """Test request path normalization."""

    def test_plain(self) -> None:
        assert normalize_uri_path("/doc/index.html") == "/doc/index.html"

    def test_dot_segments(self) -> None:
        assert normalize_uri_path("/doc/./a/../index.html") == "/doc/index.html"

    def test_cannot_escape_root(self) -> None:
        assert normalize_uri_path("/../../etc/passwd") == "/etc/passwd"

    def test_trailing_slash_kept(self) -> None:
        assert normalize_uri_path("/doc/") == "/doc/"
        assert normalize_uri_path("/") == "/"

    def test_repeated_slashes(self) -> None:
        assert normalize_uri_path("//doc//index.html") == "/doc/index.html"

    def test_relative_path(self) -> None:
        assert normalize_uri_path("doc/index.html") == "/doc/index.html"


class TestTranslateRequestPath:
    """Test filename / path info splitting."""

    def test_existing_file(self, make_docs, doc_root: Path) -> None:
        make_docs("index.html")

        result = translate_request_path(doc_root, "/doc/index.html")

        assert result.filename == str(doc_root / "doc" / "index.html")
        assert result.path_info == ""
        assert result.exists

    def test_missing_file(self, make_docs, doc_root: Path) -> None:
        """A missing name in an existing directory is kept in the filename."""
        make_docs("index.html")

        result = translate_request_path(doc_root, "/doc/indx.html")

        assert result.filename == str(doc_root / "doc" / "indx.html")
        assert result.path_info == ""
        assert not result.exists

    def test_missing_file_with_path_info(self, make_docs, doc_root: Path) -> None:
        """Components past the first missing one become path info."""
        make_docs("index.html")

        result = translate_request_path(doc_root, "/doc/indx.html/more/stuff")

        assert result.filename == str(doc_root / "doc" / "indx.html")
        assert result.path_info == "/more/stuff"
        assert not result.exists

    def test_file_with_path_info(self, make_docs, doc_root: Path) -> None:
        """Components past an existing file become path info."""
        make_docs("script.cgi")

        result = translate_request_path(doc_root, "/doc/script.cgi/extra")

        assert result.filename == str(doc_root / "doc" / "script.cgi")
        assert result.path_info == "/extra"
        assert result.exists

    def test_missing_directory(self, doc_root: Path) -> None:
        """Only the first missing component is kept in the filename."""
        result = translate_request_path(doc_root, "/dco/index.html")

        assert result.filename == str(doc_root / "dco")
        assert result.path_info == "/index.html"
        assert not result.exists

    def test_directory(self, doc_root: Path) -> None:
        result = translate_request_path(doc_root, "/doc/")

        assert result.exists
        assert result.path_info == ""

    def test_uri_ends_with_basename_and_path_info(self, make_docs, doc_root: Path) -> None:
        """Translated requests satisfy the URI / filename invariant."""
        make_docs("index.html")
        uri = "/doc/indx.html/a/b"

        result = translate_request_path(doc_root, uri)

        basename = result.filename.rsplit("/", 1)[1]
        assert uri.endswith(basename + result.path_info)
