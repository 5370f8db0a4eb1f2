import io
from collections import namedtuple
from dataclasses import dataclass

from primer.display import display


def _show(name, x):
    buf = io.StringIO()
    display(name, x, buf)
    return buf.getvalue()


@dataclass
class Holder:
    x: object


@dataclass
class Movie:
    title: str
    subtitle: str
    year: int
    color: bool
    actor: dict
    oscars: list
    sequel: str | None = None


def test_slice_with_nil():
    assert _show("slice", [0, None]) == (
        "Display slice (list):\nslice[0] = 0\nslice[1] = nil\n"
    )


def test_nil_value():
    assert _show("w", None) == "Display w (<nil>):\nw = invalid\n"


def test_plain_int():
    assert _show("i", 3) == "Display i (int):\ni = 3\n"


def test_array():
    assert _show("x", (3,)) == "Display x (tuple):\nx[0] = 3\n"


def test_struct():
    assert _show("x", Holder(3)) == "Display x (Holder):\nx.x = 3\n"


def test_named_tuple_fields():
    Point = namedtuple("Point", "x y")
    assert _show("p", Point(1, 2)) == "Display p (Point):\np.x = 1\np.y = 2\n"


def test_map_with_int_keys():
    assert _show("m", {1: "a"}) == 'Display m (dict):\nm[1] = "a"\n'


def test_movie():
    strangelove = Movie(
        title="Dr. Strangelove",
        subtitle="How I Learned to Stop Worrying and Love the Bomb",
        year=1964,
        color=False,
        actor={
            "Dr. Strangelove": "Peter Sellers",
            "Grp. Capt. Lionel Mandrake": "Peter Sellers",
            "Pres. Merkin Muffley": "Peter Sellers",
            "Gen. Buck Turgidson": "George C. Scott",
            "Brig. Gen. Jack D. Ripper": "Sterling Hayden",
            'Maj. T.J. "King" Kong': "Slim Pickens",
        },
        oscars=[
            "Best Actor (Nomin.)",
            "Best Adapted Screenplay (Nomin.)",
            "Best Director (Nomin.)",
            "Best Picture (Nomin.)",
        ],
    )
    want = [
        "Display strangelove (Movie):",
        'strangelove.title = "Dr. Strangelove"',
        'strangelove.subtitle = "How I Learned to Stop Worrying and Love the Bomb"',
        "strangelove.year = 1964",
        "strangelove.color = false",
        'strangelove.actor["Dr. Strangelove"] = "Peter Sellers"',
        'strangelove.actor["Grp. Capt. Lionel Mandrake"] = "Peter Sellers"',
        'strangelove.actor["Pres. Merkin Muffley"] = "Peter Sellers"',
        'strangelove.actor["Gen. Buck Turgidson"] = "George C. Scott"',
        'strangelove.actor["Brig. Gen. Jack D. Ripper"] = "Sterling Hayden"',
        'strangelove.actor["Maj. T.J. \\"King\\" Kong"] = "Slim Pickens"',
        'strangelove.oscars[0] = "Best Actor (Nomin.)"',
        'strangelove.oscars[1] = "Best Adapted Screenplay (Nomin.)"',
        'strangelove.oscars[2] = "Best Director (Nomin.)"',
        'strangelove.oscars[3] = "Best Picture (Nomin.)"',
        "strangelove.sequel = nil",
    ]
    assert _show("strangelove", strangelove) == "\n".join(want) + "\n"


def test_writes_to_stdout_by_default(capsys):
    display("i", 3)
    assert capsys.readouterr().out == "Display i (int):\ni = 3\n"