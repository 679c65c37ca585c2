import subprocess
import sys
from pathlib import Path

from watchfiles import watch

from system.runtime_settings import SETTINGS_PATH

WATCHED_DIRS = ("core", "qt", "ui", "system")


def start_app(args):
    return subprocess.Popen([sys.executable, "main.py", *args])


def should_restart(changed_paths):
    for _change, path in changed_paths:
        changed = Path(path)
        if changed.suffix == ".py" or changed.name == SETTINGS_PATH.name:
            return True
    return False


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)
    process = start_app(args)
    targets = [p for p in (*WATCHED_DIRS, "main.py", str(SETTINGS_PATH)) if Path(p).exists()]
    try:
        for changes in watch(*targets, recursive=True):
            if not should_restart(changes):
                continue
            print("Detected source or settings change. Restarting app...")
            process.terminate()
            process.wait()
            process = start_app(args)
    except KeyboardInterrupt:
        pass
    finally:
        if process.poll() is None:
            process.terminate()
            process.wait()


if __name__ == "__main__":
    main()
