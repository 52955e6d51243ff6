"""Template archive download."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import httpx

from zapforge.contracts.errors import ErrorKind, ScaffoldError

logger = logging.getLogger(__name__)

_USER_AGENT = "zapforge"


class ArchiveFetcher:
    """Download a remote tarball into the target directory.

    The archive lands inside the target so that removing the target on
    rollback also removes any partial download. No retries are attempted.
    """

    def __init__(
        self,
        *,
        archive_name: str = "template.tar.gz",
        timeout: float = 30.0,
        client_factory: Callable[[], httpx.Client] | None = None,
    ) -> None:
        self._archive_name = archive_name
        self._client_factory = client_factory or (
            lambda: httpx.Client(timeout=timeout, follow_redirects=True, headers={"User-Agent": _USER_AGENT})
        )

    def fetch(self, url: str, target: Path) -> Path:
        destination = Path(target) / self._archive_name
        logger.debug("downloading %s to %s", url, destination)
        try:
            with self._client_factory() as client, client.stream("GET", url) as response:
                if not response.is_success:
                    raise ScaffoldError(
                        ErrorKind.NETWORK,
                        f"template download failed with HTTP {response.status_code}: {url}",
                        path=url,
                    )
                written = 0
                with destination.open("wb") as handle:
                    for chunk in response.iter_bytes():
                        handle.write(chunk)
                        written += len(chunk)
        except httpx.HTTPError as exc:
            raise ScaffoldError(ErrorKind.NETWORK, f"template download failed: {exc}", path=url) from exc
        except OSError as exc:
            raise ScaffoldError(
                ErrorKind.PERMISSION, f"cannot write template archive {destination}: {exc}", path=destination
            ) from exc

        logger.debug("downloaded %d bytes", written)
        return destination
