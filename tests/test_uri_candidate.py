from pathinfo.uri import (
    is_http_uri,
    is_well_formed_absolute_uri,
    join_uri_candidate,
    uri_candidate,
    uri_scheme,
)


def test_well_formed_http_uris():
    for text in [
        "http://example.com",
        "https://example.com/repo/manifest.yaml",
        "https://example.com:8443/a%20b?x=1#frag",
        "http://[::1]:8080/x",
    ]:
        assert is_well_formed_absolute_uri(text), text
        assert is_http_uri(text), text


def test_malformed_uris_are_rejected():
    for text in [
        "",
        "https://example.com/a b",
        "https://example.com\\repo",
        "https://example.com/%zz",
        "https://example.com:99999/",
        "https://example.com:port/",
        "https:",
        "https:relative",
        "https:///nohost",
        "1http://example.com",
        "manifest.yaml",
        "/repo/manifest.yaml",
        "C:\\repo\\manifest.yaml",
        "https://example.com/\u00a0x",
        "https://example.com/\udcff",
    ]:
        assert not is_well_formed_absolute_uri(text) or not is_http_uri(text), text


def test_non_http_schemes_are_well_formed_but_not_http():
    assert is_well_formed_absolute_uri("ftp://mirror/file.msi")
    assert uri_scheme("ftp://mirror/file.msi") == "ftp"
    assert not is_http_uri("ftp://mirror/file.msi")
    assert uri_scheme("HTTPS://example.com") == "https"


def test_absolute_path_uri_is_used_directly():
    url = "https://example.com/repo/file.msi"
    assert uri_candidate(url, "https://other.example/base") == url


def test_join_treats_backslashes_as_separators():
    joined = uri_candidate("sub\\file.msi", "https://example.com/repo")
    assert joined == "https://example.com/repo/sub/file.msi"


def test_join_trims_separators_to_a_single_slash():
    assert (
        join_uri_candidate("https://example.com/repo//", "\\\\sub/file.msi")
        == "https://example.com/repo/sub/file.msi"
    )


def test_join_escapes_unsafe_characters():
    joined = uri_candidate("my setup (x64).msi", "https://example.com/repo/")
    assert joined == "https://example.com/repo/my%20setup%20(x64).msi"


def test_join_keeps_existing_escapes_and_escapes_stray_percent():
    assert join_uri_candidate("https://h", "a%20b") == "https://h/a%20b"
    assert join_uri_candidate("https://h", "100%.txt") == "https://h/100%25.txt"


def test_no_candidate_without_base():
    assert uri_candidate("sub\\file.msi") is None
    assert uri_candidate("missing.txt", "") is None


def test_no_candidate_for_filesystem_base():
    assert uri_candidate("file.txt", "/var/repo") is None
    assert uri_candidate("file.txt", "C:\\repo") is None


def test_non_ascii_url_is_escaped_like_its_joined_form():
    direct = uri_candidate("https://example.com/repo/ü.msi")
    joined = uri_candidate("ü.msi", "https://example.com/repo")
    assert direct == joined == "https://example.com/repo/%C3%BC.msi"
    assert is_http_uri("https://example.com/repo/ü.msi")


def test_join_with_undecodable_name_does_not_raise():
    assert uri_candidate("\udcff.msi", "https://example.com/repo") == (
        "https://example.com/repo/%ED%B3%BF.msi"
    )
