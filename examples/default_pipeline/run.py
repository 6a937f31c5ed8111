"""Run the default pipeline on a few seeds with the Rich sink."""

from maybechain import RichSink, run_chain

if __name__ == "__main__":
    sink = RichSink()
    for seed in ("100", "15", "21", "abc"):
        run_chain(seed, sink, sink.publish_result)
        sink.console.rule()
