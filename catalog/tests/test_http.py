import pytest

from catalog.http import safe_redirect


@pytest.mark.parametrize(
    ("to", "expected"),
    [
        ("/api/collections/all/products/?sort=newest", "/api/collections/all/products/?sort=newest"),
        ("//evil.example.com/", "/"),
        ("https://evil.example.com/", "/"),
        ("relative/path", "/"),
        ("", "/"),
        (None, "/"),
        (42, "/"),
    ],
)
def test_safe_redirect_only_allows_local_paths(to: object, expected: str) -> None:
    response = safe_redirect(to)

    assert response.status_code == 302
    assert response["Location"] == expected


def test_safe_redirect_see_other() -> None:
    response = safe_redirect("/api/collections/all/products/", status=303)

    assert response.status_code == 303
