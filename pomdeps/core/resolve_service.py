"""
Resolve service implementation for pomdeps.

Loads configuration, resolves a descriptor through the Maven extractor and
hands the records to the output layer. The CLI stays a thin wrapper around
this service.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple

from pomdeps.config_validator import ConfigValidator
from pomdeps.core.config_manager import ConfigManager
from pomdeps.core.output import emit
from pomdeps.extractors.maven import MavenExtractor
from pomdeps.rich_utils.ui_helpers import get_console
from pomdeps.utils.exceptions import ConfigurationError, PomDepsError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


class ResolveService:
    """Runs one ``pomdeps resolve`` invocation."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.config_validator = ConfigValidator()
        self.console = get_console()
        self.error_console = get_console(stderr=True)

    def load_config(
        self,
        config_path: Optional[str],
        output_format: Optional[str] = None,
        output: Optional[str] = None,
        resolve_parents: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> dict:
        """Load, merge and validate configuration.

        Raises:
            ConfigurationError: If the config file is missing or invalid
        """
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(
            config, output_format, output, resolve_parents, log_level
        )

        errors = self.config_validator.validate_config(config)
        if errors:
            raise ConfigurationError("; ".join(errors), path=config_path)
        return config

    def locate_descriptor(self, path: str, descriptor_filename: str) -> Tuple[Path, str]:
        """Split a descriptor path or project directory into (project dir, file name)."""
        target = Path(path)
        if target.is_dir():
            return target, descriptor_filename
        return target.parent, target.name

    def execute_resolve(
        self,
        path: str,
        config_path: Optional[str] = None,
        output_format: Optional[str] = None,
        output: Optional[str] = None,
        resolve_parents: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> int:
        """Execute the resolve workflow and return a process exit code."""
        try:
            config = self.load_config(config_path, output_format, output, resolve_parents, log_level)
        except ConfigurationError as e:
            self.error_console.print(f"❌ {e}", style="red", markup=False)
            return 1

        configure_logging(config["logging"].get("level", "WARNING"))

        if not Path(path).exists():
            self.error_console.print(f"❌ Path not found: {path}", style="red", markup=False)
            return 1

        maven_config = config["maven"]
        project_dir, filename = self.locate_descriptor(
            path, maven_config.get("descriptor_filename", "pom.xml")
        )
        extractor = MavenExtractor(str(project_dir), descriptor_filename=filename)
        if not extractor.can_extract():
            self.error_console.print(f"⚠️ No {filename} found in {project_dir}", style="yellow", markup=False)
            return 1

        try:
            records = extractor.extract_dependencies(config)
            written = emit(
                records,
                config["output"].get("format", "json"),
                self.console,
                output_file=config["output"].get("file"),
                title=str(project_dir / filename),
            )
        except PomDepsError as e:
            self.error_console.print(f"❌ {e}", style="red", markup=False)
            return 1

        if written:
            self.error_console.print(f"✓ {len(records)} dependencies written to {written}", style="green", markup=False)
        return 0
