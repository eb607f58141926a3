"""Configuration validation for pomdeps."""

from typing import Any, Dict, List

OUTPUT_FORMATS = {"json", "table", "cyclonedx"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
OS_FIELDS = ("name", "family", "arch", "version")


class ConfigValidator:
    """Validates pomdeps configuration."""

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if "maven" not in config:
            errors.append("Missing 'maven' section in configuration")
            return errors

        errors.extend(self.validate_maven(config["maven"]))

        if "output" in config:
            errors.extend(self.validate_output(config["output"]))

        if "logging" in config:
            errors.extend(self.validate_logging(config["logging"]))

        return errors

    def validate_maven(self, maven_config: Dict[str, Any]) -> List[str]:
        """Validate the maven section.

        Args:
            maven_config: Maven configuration dictionary

        Returns:
            List of validation error messages
        """
        errors = []
        if not isinstance(maven_config, dict):
            return ["'maven' section must be a mapping"]

        filename = maven_config.get("descriptor_filename", "pom.xml")
        if not isinstance(filename, str) or not filename.strip():
            errors.append("'descriptor_filename' must be a non-empty string")
        elif "." not in filename:
            errors.append(f"'descriptor_filename' must have an extension, got {filename}")

        depth = maven_config.get("max_parent_depth", 10)
        # bool is an int subclass
        if not isinstance(depth, int) or isinstance(depth, bool):
            errors.append("'max_parent_depth' must be an integer")
        elif depth < 0:
            errors.append(f"'max_parent_depth' must not be negative, got {depth}")

        if not isinstance(maven_config.get("resolve_parents", True), bool):
            errors.append("'resolve_parents' must be boolean")

        if "reference_environment" in maven_config:
            errors.extend(self.validate_reference_environment(maven_config["reference_environment"]))

        return errors

    def validate_reference_environment(self, reference: Any) -> List[str]:
        """Validate the JDK / OS used for profile activation."""
        if not isinstance(reference, dict):
            return ["'reference_environment' must be a mapping"]

        errors = []
        jdk = reference.get("jdk")
        if jdk is not None and not isinstance(jdk, (str, int, float)):
            errors.append("'reference_environment.jdk' must be a version string")

        os_config = reference.get("os")
        if os_config is None:
            return errors
        if not isinstance(os_config, dict):
            errors.append("'reference_environment.os' must be a mapping")
            return errors

        for key in os_config:
            if key not in OS_FIELDS:
                errors.append(f"Unknown field in 'reference_environment.os': {key}")
            elif os_config[key] is not None and not isinstance(os_config[key], str):
                errors.append(f"'reference_environment.os.{key}' must be a string")

        return errors

    def validate_output(self, output_config: Any) -> List[str]:
        if not isinstance(output_config, dict):
            return ["'output' section must be a mapping"]

        errors = []
        output_format = output_config.get("format", "json")
        if output_format not in OUTPUT_FORMATS:
            errors.append(
                f"'output.format' must be one of {', '.join(sorted(OUTPUT_FORMATS))}, got {output_format}"
            )
        output_file = output_config.get("file")
        if output_file is not None and not isinstance(output_file, str):
            errors.append("'output.file' must be a path string")
        return errors

    def validate_logging(self, logging_config: Any) -> List[str]:
        if not isinstance(logging_config, dict):
            return ["'logging' section must be a mapping"]

        level = logging_config.get("level", "WARNING")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            return [f"'logging.level' must be one of {', '.join(sorted(LOG_LEVELS))}, got {level}"]
        return []
