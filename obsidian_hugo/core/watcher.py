"""Watch a vault and re-export notes as they change.

The watch loop consumes an iterable of ChangeEvent objects (or exceptions
reported by the notification backend). WatchdogEventSource provides that
iterable on top of watchdog; any other backend can be swapped in.
"""

import os
import queue
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from obsidian_hugo.core.discovery import is_hidden, is_note
from obsidian_hugo.core.exporter import Exporter
from obsidian_hugo.core.models import ChangeEvent, ChangeKind, ExportResult

WatchItem = Union[ChangeEvent, Exception]

BACKUP_SUFFIX = '~'


def should_ignore(path: Path) -> bool:
    """Check for hidden files and editor backup files."""
    name = Path(path).name
    return is_hidden(name) or name.endswith(BACKUP_SUFFIX)


class WatchLoop:
    """Re-exports modified notes, one event at a time."""

    def __init__(self, exporter: Exporter, source_root: Optional[Path] = None):
        self.exporter = exporter
        self.source_root = Path(source_root) if source_root else exporter.source_root

    def run(self, events: Iterable[WatchItem]) -> None:
        """Consume events until the iterable is exhausted.

        Backend errors are printed and skipped; export errors propagate.
        """
        for item in events:
            if isinstance(item, Exception):
                print(f"Error: {item!r}")
                continue
            self.handle(item)

    def handle(self, event: ChangeEvent) -> List[ExportResult]:
        """Re-export every note touched by a modify event.

        Returns:
            Results of the exports that were run
        """
        results: List[ExportResult] = []
        if event.kind is not ChangeKind.MODIFIED:
            return results

        for path in event.paths:
            path = Path(path)
            if should_ignore(path):
                continue
            if not self._is_under_root(path):
                continue
            if not (is_note(path) and path.is_file()):
                continue
            result = self.exporter.export_path(path)
            if result is not None:
                results.append(result)
        return results

    def _is_under_root(self, path: Path) -> bool:
        try:
            path.relative_to(self.source_root)
        except ValueError:
            return False
        return True


class WatchdogEventSource(FileSystemEventHandler):
    """Feeds watchdog notifications into a queue of ChangeEvents.

    The observer thread only enqueues; iterating the source blocks on the
    queue, so all exports run on the consuming thread.
    """

    def __init__(self, root: Path, poll_interval: float = 1.0):
        super().__init__()
        self.root = Path(root)
        self.poll_interval = poll_interval
        self.events: "queue.Queue[WatchItem]" = queue.Queue()
        self._observer: Optional[Observer] = None

    def start(self) -> None:
        """Start watching the root recursively."""
        observer = Observer()
        observer.schedule(self, str(self.root), recursive=True)
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        if self._observer is not None:
            self._observer.stop()
            self._observer.join()
            self._observer = None

    def __iter__(self) -> Iterator[WatchItem]:
        while True:
            try:
                yield self.events.get(timeout=self.poll_interval)
            except queue.Empty:
                if self._observer is None or self._observer.is_alive():
                    continue
                yield RuntimeError(f"Observer for {self.root} stopped, restarting")
                error = self._restart()
                if error is not None:
                    yield error

    def _restart(self) -> Optional[Exception]:
        """Replace a dead observer, returning the error if that fails.

        On failure the dead observer is kept, so the restart is retried
        after the next poll interval.
        """
        try:
            self.start()
        except Exception as e:
            return e
        return None

    def _put(self, kind: ChangeKind, event: FileSystemEvent, path: str) -> None:
        if event.is_directory:
            return
        self.events.put(ChangeEvent(kind, (Path(os.fsdecode(path)),)))

    def on_modified(self, event: FileSystemEvent):
        self._put(ChangeKind.MODIFIED, event, event.src_path)

    def on_moved(self, event: FileSystemEvent):
        # Editors that save through a rename only produce a move
        self._put(ChangeKind.MODIFIED, event, event.dest_path)

    def on_created(self, event: FileSystemEvent):
        self._put(ChangeKind.CREATED, event, event.src_path)

    def on_deleted(self, event: FileSystemEvent):
        self._put(ChangeKind.DELETED, event, event.src_path)
