import os
import tempfile
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from trailmap.canvas import Canvas
from trailmap.logger import logger


def current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def _write_png(canvas: Canvas, output_path: str) -> str:
    directory = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(directory, exist_ok=True)

    # Encode next to the target and rename so readers never see a partial file
    fd, tmp_path = tempfile.mkstemp(suffix=".png.tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            canvas.image.save(f, format="PNG")
        # mkstemp creates owner-only files; match a plain open() instead
        os.chmod(tmp_path, 0o666 & ~current_umask())
        os.replace(tmp_path, output_path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise

    return output_path


def save_canvas(
    canvas: Canvas,
    output_path: str,
    on_complete: Optional[Callable[[Future], None]] = None,
) -> Future:
    """
    Encode the finished canvas to a PNG file in the background.

    The canvas must not be drawn on after this call. The returned future
    resolves to the output path once the file is in place.
    """
    logger.info(f"Saving map to {output_path}...")
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="image-writer")
    future = executor.submit(_write_png, canvas, output_path)
    if on_complete is not None:
        future.add_done_callback(on_complete)
    executor.shutdown(wait=False)
    return future
