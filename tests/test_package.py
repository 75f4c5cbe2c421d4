import dashkit


def test_public_api():
    assert dashkit.difference([2, 1], [2, 3]) == [1]
    assert dashkit.escape("<b>") == "&lt;b&gt;"
    assert dashkit.unescape("&lt;b&gt;") == "<b>"
    for name in dashkit.__all__:
        assert hasattr(dashkit, name)
