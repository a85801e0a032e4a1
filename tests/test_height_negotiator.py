from mailsurface.sync.height import HeightNegotiator


def test_starts_at_default_height():
    assert HeightNegotiator().current_height == 400.0
    assert HeightNegotiator(default_height=250).current_height == 250.0


def test_repeated_reports_trigger_one_layout():
    changes = []
    negotiator = HeightNegotiator(changes.append)

    assert negotiator.on_height_report(812)
    assert not negotiator.on_height_report(812)
    assert not negotiator.on_height_report(812.0)

    assert changes == [812.0]
    assert negotiator.current_height == 812.0


def test_report_equal_to_default_is_a_no_op():
    changes = []
    negotiator = HeightNegotiator(changes.append)

    assert not negotiator.on_height_report(400)
    assert changes == []


def test_invalid_reports_are_ignored():
    changes = []
    negotiator = HeightNegotiator(changes.append)

    for value in (float("nan"), float("inf"), -1):
        assert not negotiator.on_height_report(value)

    assert changes == []
    assert negotiator.current_height == 400.0


def test_shrinking_content_is_reported():
    changes = []
    negotiator = HeightNegotiator(changes.append)

    negotiator.on_height_report(900)
    negotiator.on_height_report(300)

    assert changes == [900.0, 300.0]


def test_disposed_negotiator_stops_reporting():
    changes = []
    negotiator = HeightNegotiator(changes.append)

    negotiator.dispose()

    assert not negotiator.on_height_report(600)
    assert changes == []
    assert negotiator.disposed
