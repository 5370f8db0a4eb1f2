from primer.netflag import Flags, is_cast, is_up, main, set_broadcast, turn_down


def test_is_up():
    assert is_up(Flags.UP | Flags.MULTICAST) is True
    assert is_up(Flags.MULTICAST) is False


def test_turn_down_clears_only_up():
    v = turn_down(Flags.UP | Flags.MULTICAST)
    assert not is_up(v)
    assert v == Flags.MULTICAST


def test_turn_down_is_idempotent():
    v = Flags.LOOPBACK
    assert turn_down(v) == v


def test_set_broadcast():
    v = set_broadcast(Flags.MULTICAST)
    assert v & Flags.BROADCAST
    assert v & Flags.MULTICAST
    assert set_broadcast(v) == v


def test_is_cast():
    assert is_cast(Flags.BROADCAST)
    assert is_cast(Flags.MULTICAST)
    assert not is_cast(Flags.UP | Flags.LOOPBACK)


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "10001 true",
        "10000 false",
        "10010 false",
        "10010 true",
    ]