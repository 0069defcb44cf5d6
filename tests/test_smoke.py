import motley_hue


def test_smoke():
    out = motley_hue.triadic("FF0000")
    assert isinstance(out, list) and len(out) == 3
    assert out[0] == "FF0000"
    for color in out:
        assert isinstance(color, str) and len(color) == 6
