"""High-level metadata restoration between images.

Orchestrates the extract → cache → inject pipeline.  ``MetadataSession``
is the object a front end keeps around between the two user actions;
``restore_metadata`` does both steps for two files in one call.
"""

from __future__ import annotations

from pathlib import Path

from cache import MetadataCache
from constants import OUTPUT_PREFIX
from errors import NoMetadataFoundError
from exif_adapter import ExifAdapter
from extractor import extract, extract_file
from injector import inject
from models import Metadata, ProcessedImage
from utils import ImageType, get_image_type


class MetadataSession:
    """Extract metadata from one image and inject it into others.

    The session owns a ``MetadataCache``; the last successful extraction
    is what gets injected.
    """

    def __init__(
        self,
        adapter: ExifAdapter | None = None,
        cache: MetadataCache | None = None,
    ) -> None:
        self.adapter = adapter
        self.cache = cache if cache is not None else MetadataCache()

    @property
    def cached(self) -> Metadata | None:
        return self.cache.get()

    def extract(
        self,
        data: bytes,
        declared_type: ImageType | str,
        source_name: str | None = None,
    ) -> Metadata | None:
        """
        Extract metadata and cache it on success.

        Returns None, leaving the cache unchanged, when the image has no
        AI metadata.  Errors also leave the cache unchanged.
        """

        def produce() -> Metadata | None:
            metadata = extract(data, declared_type, self.adapter)
            if metadata is None:
                return None
            return Metadata(metadata.variant, metadata.data, source_name)

        return self.cache.update(produce)

    def inject(
        self,
        data: bytes,
        declared_type: ImageType | str,
        target_name: str = "image",
    ) -> ProcessedImage:
        """
        Inject the cached metadata into *data*.

        Returns:
            The new bytes with suggested filename ``fixed_<target_name>``.
        """
        output = inject(data, declared_type, self.cached, self.adapter)
        return ProcessedImage(output, OUTPUT_PREFIX + target_name)

    def clear(self) -> None:
        self.cache.clear()


def restore_metadata(
    source_path: Path,
    target_path: Path,
    output_path: Path | None = None,
    adapter: ExifAdapter | None = None,
) -> Path:
    """
    Copy AI metadata from source image to target image.

    Supports PNG and JPG formats; both files must be the same format.

    Args:
        source_path: Path to the source image file (metadata donor).
        target_path: Path to the edited image file (image donor).
        output_path: Optional output path. Defaults to ``fixed_<target name>``
            next to the target.
        adapter: EXIF adapter for the JPEG path.

    Returns:
        Path to the output file with restored metadata.

    Raises:
        NoMetadataFoundError: If the source has no AI metadata.
    """
    source_path = Path(source_path)
    target_path = Path(target_path)

    metadata = extract_file(source_path, adapter)
    if metadata is None:
        raise NoMetadataFoundError(f"No AI metadata found in '{source_path}'")

    output = inject(target_path.read_bytes(), get_image_type(target_path), metadata, adapter)

    if output_path is None:
        output_path = target_path.with_name(OUTPUT_PREFIX + target_path.name)
    output_path = Path(output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(output)

    return output_path


__all__ = [
    "MetadataSession",
    "restore_metadata",
]
