# --------------------------------------------------
# Progress bar for long-running builds (estimation)
# --------------------------------------------------

import time, sys
from multiprocessing import Process, Event

_pb_evt = None
_pb_proc = None

def _fmt_time(s: float) -> str:
    s = max(0.0, s)
    m, sec = divmod(int(round(s)), 60)
    h, m = divmod(m, 60)
    return f"{h:02d}:{m:02d}:{sec:02d}" if h else f"{m:02d}:{sec:02d}"

def _render_line(label: str, frac: float, bar_len: int, elapsed: float, remaining: float) -> str:
    filled = int(bar_len * frac)
    bar = "█" * filled + " " * (bar_len - filled)
    return f"\r{label} {int(frac * 100):3d}%|{bar}| {_fmt_time(elapsed)}<{_fmt_time(remaining)}"

def _progress_worker(label: str, total_seconds: float, bar_len: int, tick: float, stop_evt: Event):
    start = time.perf_counter()
    while not stop_evt.is_set():
        elapsed = time.perf_counter() - start
        frac = elapsed / total_seconds if total_seconds > 0 else 1.0
        # the estimate is rough: hold at 99% until the build reports done
        frac = min(frac, 0.99)
        remaining = max(0.0, total_seconds - elapsed)
        sys.stdout.write(_render_line(label, frac, bar_len, elapsed, remaining))
        sys.stdout.flush()
        time.sleep(tick)

    elapsed = time.perf_counter() - start
    sys.stdout.write(_render_line(label, 1.0, bar_len, elapsed, 0.0) + "\n")
    sys.stdout.flush()

def start_progress_bar(estimated_seconds: float, label: str = "Building", bar_len: int = 40, update_every: float = 0.1):
    """Start the estimated-time bar in a separate process."""
    global _pb_evt, _pb_proc
    _pb_evt = Event()
    _pb_proc = Process(target=_progress_worker, args=(
        str(label), float(estimated_seconds), int(bar_len), float(update_every), _pb_evt
    ), daemon=True)
    _pb_proc.start()

def stop_progress_bar():
    """Stop the bar and print a final 100% line."""
    global _pb_evt, _pb_proc
    if _pb_evt is not None:
        _pb_evt.set()
    if _pb_proc is not None:
        _pb_proc.join()
    _pb_evt = None
    _pb_proc = None
