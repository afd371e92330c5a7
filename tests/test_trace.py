from stagezero.trace import InstructionTrace


def test_empty_report():
    assert InstructionTrace().report() == ""


def test_counts_in_first_seen_order():
    trace = InstructionTrace()
    for name in ["ADD", "HALT", "ADD", "NOP", "ADD"]:
        trace.record(name)
    assert trace.report() == "ADD\t3\nHALT\t1\nNOP\t1\n"


def test_total_matches_records():
    trace = InstructionTrace()
    names = ["a", "b", "c", "a", "b", "a"]
    for name in names:
        trace.record(name)
    assert sum(trace.counts.values()) == len(names)
    assert list(trace.counts) == ["a", "b", "c"]


def test_long_names_compare_on_prefix():
    trace = InstructionTrace()
    trace.record("x" * 255 + "a")
    trace.record("x" * 255 + "b")
    assert trace.counts == {"x" * 255: 2}