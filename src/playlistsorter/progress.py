"""Console progress bar for playlist rebuilds."""

from typing import Optional

from tqdm import tqdm

from .models import VideoEntry
from .utils import truncate_title


class ProgressBar:
    """Progress callback for PlaylistBuilder backed by tqdm.

    The bar is created on the first update, once the total is known.
    """

    def __init__(self, desc: str = "Adding videos", disable: bool = False) -> None:
        self.desc = desc
        self.disable = disable
        self._bar: Optional[tqdm] = None

    def __call__(self, position: int, total: int, entry: VideoEntry) -> None:
        if self._bar is None:
            self._bar = tqdm(total=total, desc=self.desc, unit="video", disable=self.disable)
        # Skipped videos still count toward the position
        self._bar.update(position - self._bar.n)
        self._bar.set_postfix_str(truncate_title(entry.title, 40))

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None
