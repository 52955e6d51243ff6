"""Strip-top-level extraction of template tarballs."""

from __future__ import annotations

import logging
import tarfile
import zlib
from pathlib import Path, PurePosixPath

from zapforge.contracts.errors import ErrorKind, ScaffoldError

logger = logging.getLogger(__name__)


class ArchiveExtractor:
    """Unpack a gzip tarball, discarding its single wrapper directory.

    Repository snapshots are shipped as ``<repo>-<sha>/...``; the wrapper is
    dropped so its contents land directly in the target. Members go through
    the standard ``data`` extraction filter, which rejects absolute paths,
    ``..`` traversal, device files and links pointing outside the target.
    """

    def extract(self, archive: Path, target: Path) -> list[str]:
        archive = Path(archive)
        target = Path(target)
        try:
            with tarfile.open(archive, "r:gz") as tar:
                members = tar.getmembers()
                wrapper = _wrapper_name(members, archive)
                stripped = [m for m in (_strip(member, archive) for member in members) if m is not None]
                _reject_archive_overwrite(stripped, archive, target)
                logger.debug("extracting %d entries from wrapper %s into %s", len(stripped), wrapper, target)
                tar.extractall(target, members=stripped, filter="data")
        except ScaffoldError:
            raise
        except (tarfile.TarError, OSError, EOFError, zlib.error) as exc:
            raise ScaffoldError(ErrorKind.EXTRACTION, f"cannot extract {archive.name}: {exc}", path=archive) from exc

        try:
            archive.unlink()
        except OSError as exc:
            raise ScaffoldError(
                ErrorKind.EXTRACTION, f"cannot remove template archive {archive}: {exc}", path=archive
            ) from exc
        return sorted(m.name for m in stripped if m.isfile())


def _wrapper_name(members: list[tarfile.TarInfo], archive: Path) -> str:
    roots: set[str] = set()
    for member in members:
        path = PurePosixPath(member.name)
        if path.is_absolute() or ".." in path.parts:
            raise ScaffoldError(
                ErrorKind.EXTRACTION, f"unsafe member path in {archive.name}: {member.name}", path=archive
            )
        if not path.parts:
            continue
        if len(path.parts) == 1 and not member.isdir():
            raise ScaffoldError(
                ErrorKind.EXTRACTION,
                f"{archive.name} has a top-level file {member.name!r}; expected a single wrapper directory",
                path=archive,
            )
        roots.add(path.parts[0])

    if len(roots) != 1:
        found = ", ".join(sorted(roots)) or "none"
        raise ScaffoldError(
            ErrorKind.EXTRACTION,
            f"{archive.name} must contain exactly one top-level directory (found: {found})",
            path=archive,
        )
    return roots.pop()


def _strip(member: tarfile.TarInfo, archive: Path) -> tarfile.TarInfo | None:
    parts = PurePosixPath(member.name).parts
    if len(parts) <= 1:
        return None
    if member.islnk():
        # Hard link targets are archive paths that would also need rewriting.
        raise ScaffoldError(
            ErrorKind.EXTRACTION, f"{archive.name} contains an unsupported hard link: {member.name}", path=archive
        )
    return member.replace(name=str(PurePosixPath(*parts[1:])), deep=False)


def _reject_archive_overwrite(members: list[tarfile.TarInfo], archive: Path, target: Path) -> None:
    # The archive is still being read while members are written into the target.
    archive_path = archive.resolve()
    for member in members:
        if (target / member.name).resolve() == archive_path:
            raise ScaffoldError(
                ErrorKind.EXTRACTION,
                f"{archive.name} contains {member.name!r}, which would overwrite the archive being extracted",
                path=archive,
            )
