"""Core functionality for git-extend"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from contextlib import nullcontext
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console

from git_extend.config import Config
from git_extend.exceptions import RepositoryOpenError
from git_extend.logging_config import get_logger
from git_extend.models.repository import RepositoryStatus
from git_extend.services.display_service import DisplayService
from git_extend.services.repository_walker import RepositoryWalker
from git_extend.services.status_resolver import StatusResolver
from git_extend.utils.threading import get_optimal_worker_count

logger = get_logger(__name__)


class RepoLister:
    """Finds the repositories under a root directory and reports their status."""

    def __init__(
        self,
        config: Union[Config, dict],
        console: Optional[Console] = None,
        status_console: Optional[Console] = None,
        resolver: Optional[StatusResolver] = None,
        display_service: Optional[DisplayService] = None,
    ):
        """Initialize the lister.

        Args:
            config: Run configuration
            console: Console the listing is printed to
            status_console: Console for the progress spinner (stderr by default)
            resolver: Status resolver, mainly for tests
            display_service: Renderer, mainly for tests
        """
        if isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.base_dir: Path = config.base_dir
        self.debug_mode = config.debug

        self.console = console or Console(
            highlight=False, soft_wrap=True, no_color=not config.color
        )
        self.status_console = status_console or Console(stderr=True)
        self.resolver = resolver or StatusResolver()
        self.display_service = display_service or DisplayService(self.console)

    def run(self) -> None:
        """Scan, resolve and print in the configured format."""
        statuses = self.collect_statuses(show_progress=True)
        self.display_service.display(self.config.output_format, statuses, self.base_dir)

    def discover(self) -> List[Path]:
        """Candidate repository roots under the base directory."""
        candidates = list(RepositoryWalker(self.base_dir).discover())
        logger.info(f"Found {len(candidates)} repositories under {self.base_dir}")
        return candidates

    def collect_statuses(self, show_progress: bool = False) -> List[RepositoryStatus]:
        """Resolve every discovered repository, sorted by path.

        Candidates that cannot be opened are left out. All results are
        collected before sorting, whichever order they complete in.
        """
        status_context = (
            self.status_console.status("[bold blue]Scanning repositories...", spinner="dots")
            if show_progress and self.status_console.is_terminal
            else nullcontext()
        )
        with status_context:
            candidates = self.discover()
            if self.config.sequential or self.debug_mode or len(candidates) <= 1:
                statuses = self._resolve_sequential(candidates)
            else:
                statuses = self._resolve_parallel(candidates)

        statuses.sort(key=lambda status: status.path)
        return statuses

    def _resolve_one(self, repo_path: Path) -> Optional[RepositoryStatus]:
        try:
            return self.resolver.resolve(repo_path)
        except RepositoryOpenError as e:
            logger.debug(f"Skipping {repo_path}: {e}")
            return None

    def _resolve_sequential(self, candidates: List[Path]) -> List[RepositoryStatus]:
        statuses = []
        for repo_path in candidates:
            status = self._resolve_one(repo_path)
            if status is not None:
                statuses.append(status)
        return statuses

    def _resolve_parallel(self, candidates: List[Path]) -> List[RepositoryStatus]:
        """Resolve candidates on a thread pool."""
        max_workers = get_optimal_worker_count(self.config.workers)
        logger.debug(f"Using {max_workers} workers for {len(candidates)} repositories")

        statuses = []
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(self._resolve_one, repo_path) for repo_path in candidates]
            for future in as_completed(futures):
                status = future.result()
                if status is not None:
                    statuses.append(status)
        return statuses
