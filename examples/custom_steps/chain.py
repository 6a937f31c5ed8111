"""Custom steps on the same Maybe machinery."""

from maybechain import Chain, ListSink, absent, run_chain, step, unit


@step
def non_negative(x, report):  # noqa: D401
    if x < 0:
        report(f"{x} is negative", True)
        return absent()
    report(f"{x} accepted", False)
    return unit(x)


@step(id="square")
def square(x, report):  # noqa: D401
    report(f"squaring {x}", False)
    return unit(x * x)


squares_chain = Chain(name="Squares Demo", steps=[non_negative, square])


if __name__ == "__main__":
    sink = ListSink()
    outcome = run_chain("7", sink, sink.publish_result, chain=squares_chain)
    for msg in sink.messages:
        print(("!! " if msg.failed else "   ") + msg.text)
    print("result:", sink.result)
