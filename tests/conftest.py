"""Shared fixtures for HTMLScan tests."""

import textwrap

import pytest

SECURE_HEAD = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta http-equiv="Content-Security-Policy" content="default-src 'self'">
  <meta http-equiv="X-Frame-Options" content="DENY">
  <meta name="referrer" content="strict-origin-when-cross-origin">
  <meta name="description" content="A test page">
  <meta property="og:title" content="Test page">
  <title>Test</title>
</head>
<body>
"""

SECURE_TAIL = """
</body>
</html>
"""


@pytest.fixture
def page():
    """Wrap body markup in a head that satisfies every declaration check."""

    def _create(body: str = "") -> str:
        return SECURE_HEAD + textwrap.dedent(body) + SECURE_TAIL

    return _create


@pytest.fixture
def tmp_html_file(tmp_path):
    """Write markup to a temporary .html file."""

    def _create(content: str, filename: str = "index.html"):
        f = tmp_path / filename
        f.write_text(content)
        return f

    return _create
