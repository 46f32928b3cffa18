# ecosim/main.py
from __future__ import annotations
import argparse
import signal
import time

from .sim.config import SIM, FIELD
from .sim.engine import Snapshot
from .sim.live import Simulator, RunState
from .sim.metrics import summarize_snapshot, format_row, append_csv
from .export.recorder import Recorder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Ecosystem simulation (predators, prey, plants, weather and disease)")
    parser.add_argument("--steps", type=int, default=SIM.steps)
    parser.add_argument("--seed", type=int, default=SIM.seed)
    parser.add_argument("--depth", type=int, default=FIELD.depth)
    parser.add_argument("--width", type=int, default=FIELD.width)
    parser.add_argument("--every", type=int, default=SIM.report_every, help="print a status line every N ticks")
    parser.add_argument("--delay", type=int, default=0, help=f"pause between ticks in ms (interactive pace is {SIM.delay_ms})")
    parser.add_argument("--csv", type=str, default=SIM.track_csv, help="append one summary row per tick")
    parser.add_argument("--record", type=str, default=SIM.record_npz, help="save species grids to this .npz")
    parser.add_argument("--stride", type=int, default=SIM.record_stride, help="record every N ticks")
    return parser


def run(argv=None) -> RunState:
    args = build_parser().parse_args(argv)

    sim = Simulator(depth=args.depth, width=args.width, seed=args.seed)
    sim.set_delay(args.delay)
    recorder = Recorder(enabled=bool(args.record), stride_steps=args.stride)

    start = sim.snapshot()
    recorder.maybe_capture(start)
    print(format_row(summarize_snapshot(start)))

    def on_tick(snap: Snapshot) -> None:
        row = summarize_snapshot(snap)
        if args.csv:
            append_csv(args.csv, row)
        recorder.maybe_capture(snap)
        if args.every > 0 and snap.tick % args.every == 0:
            print(format_row(row))
        if sim.delay_ms > 0:
            time.sleep(sim.delay_ms / 1000.0)

    # Ctrl-C only asks for a stop; the run ends at the next tick boundary
    previous = signal.signal(signal.SIGINT, lambda *_: sim.stop())
    try:
        state = sim.run(args.steps, on_tick=on_tick)
    finally:
        signal.signal(signal.SIGINT, previous)

    end = sim.snapshot()
    print(format_row(summarize_snapshot(end)))
    print(f"Finished after {end.tick} ticks: {state.value}")
    if args.record:
        recorder.save_npz(args.record)
    return state


def main() -> int:
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
