"""End-to-end tests for MavenResolver."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from pomdeps import InMemoryFileReader, LocalFileReader, MavenResolver, parse_pom_xml
from pomdeps.utils.exceptions import WarningStage


SPRING_POM = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
    <modelVersion>4.0.0</modelVersion>
    <groupId>com.example</groupId>
    <artifactId>demo</artifactId>
    <version>0.0.1-SNAPSHOT</version>
    <properties>
        <spring.version>2.7.0</spring.version>
    </properties>
    <dependencies>
        <dependency>
            <groupId>org.springframework.boot</groupId>
            <artifactId>spring-boot-starter-web</artifactId>
            <version>${spring.version}</version>
        </dependency>
    </dependencies>
</project>
"""

PROFILES_POM = """<project>
    <groupId>com.example</groupId>
    <artifactId>profiles</artifactId>
    <profiles>
        <profile>
            <id>default</id>
            <activation><activeByDefault>true</activeByDefault></activation>
            <dependencies>
                <dependency>
                    <groupId>com.example</groupId>
                    <artifactId>foo</artifactId>
                    <version>1.0</version>
                </dependency>
            </dependencies>
        </profile>
        <profile>
            <id>other</id>
            <activation><activeByDefault>false</activeByDefault></activation>
            <dependencies>
                <dependency>
                    <groupId>com.example</groupId>
                    <artifactId>bar</artifactId>
                    <version>2.0</version>
                </dependency>
            </dependencies>
        </profile>
    </profiles>
</project>
"""

PLUGIN_POM = """<project>
    <groupId>com.example</groupId>
    <artifactId>plugins</artifactId>
    <build>
        <plugins>
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-compiler-plugin</artifactId>
                <dependencies>
                    <dependency>
                        <groupId>org.codehaus.plexus</groupId>
                        <artifactId>plexus-compiler-javac</artifactId>
                        <version>2.8.8</version>
                    </dependency>
                </dependencies>
            </plugin>
        </plugins>
    </build>
</project>
"""

EMPTY_VERSION_POM = """<project>
    <groupId>com.example</groupId>
    <artifactId>unversioned</artifactId>
    <dependencies>
        <dependency>
            <groupId>junit</groupId>
            <artifactId>junit</artifactId>
            <version></version>
            <scope>test</scope>
        </dependency>
    </dependencies>
</project>
"""


class TestEndToEnd:
    """Whole-descriptor resolution scenarios."""

    def setup_method(self):
        self.resolver = MavenResolver()

    def test_property_version(self):
        records = self.resolver.resolve(SPRING_POM)
        assert [r.to_dict() for r in records] == [{
            "type": "maven",
            "name": "org.springframework.boot:spring-boot-starter-web",
            "version": "2.7.0",
            "scope": "prod",
            "direct": True,
        }]

    def test_active_by_default_profile(self):
        names = [r.name for r in self.resolver.resolve(PROFILES_POM)]
        assert "com.example:foo" in names
        assert "com.example:bar" not in names

    def test_plugin_dependency_scope(self):
        records = self.resolver.resolve(PLUGIN_POM)
        assert len(records) == 1
        assert records[0].name == "org.codehaus.plexus:plexus-compiler-javac"
        assert records[0].version == "2.8.8"
        assert records[0].scope == "build"

    def test_empty_version_is_latest(self):
        records = self.resolver.resolve(EMPTY_VERSION_POM)
        assert records[0].version == "latest"
        assert records[0].scope == "dev"

    def test_module_level_helper(self):
        assert parse_pom_xml(SPRING_POM)[0].version == "2.7.0"


class TestProjectCoordinates:
    """Test project.* and pom.* properties."""

    def test_project_version_reference(self):
        content = """<project>
            <groupId>com.example</groupId>
            <artifactId>multi</artifactId>
            <version>4.2.0</version>
            <dependencies>
                <dependency>
                    <groupId>${project.groupId}</groupId>
                    <artifactId>sibling</artifactId>
                    <version>${project.version}</version>
                </dependency>
                <dependency>
                    <groupId>com.example</groupId>
                    <artifactId>other</artifactId>
                    <version>${pom.version}</version>
                </dependency>
            </dependencies>
        </project>"""
        records = MavenResolver().resolve(content)
        assert [r.version for r in records] == ["4.2.0", "4.2.0"]
        # Coordinates in names are kept as declared
        assert records[0].name == "${project.groupId}:sibling"

    def test_coordinates_override_local_properties(self):
        content = """<project>
            <groupId>g</groupId><artifactId>a</artifactId><version>2.0</version>
            <properties><project.version>1.0</project.version></properties>
            <dependencies><dependency>
                <groupId>g</groupId><artifactId>b</artifactId><version>${project.version}</version>
            </dependency></dependencies>
        </project>"""
        assert MavenResolver().resolve(content)[0].version == "2.0"


class TestParentResolution:
    """Test resolution with a parent chain."""

    PARENT = """<project>
        <groupId>com.example</groupId>
        <artifactId>parent</artifactId>
        <version>5.0.0</version>
        <packaging>pom</packaging>
        <properties>
            <jackson.version>2.15.0</jackson.version>
            <override.me>parent</override.me>
        </properties>
    </project>"""

    CHILD = """<project>
        <parent>
            <groupId>com.example</groupId>
            <artifactId>parent</artifactId>
            <version>5.0.0</version>
        </parent>
        <artifactId>child</artifactId>
        <properties><override.me>child</override.me></properties>
        <dependencies>
            <dependency>
                <groupId>com.fasterxml.jackson.core</groupId>
                <artifactId>jackson-databind</artifactId>
                <version>${jackson.version}</version>
            </dependency>
            <dependency>
                <groupId>com.example</groupId>
                <artifactId>local</artifactId>
                <version>${override.me}</version>
            </dependency>
            <dependency>
                <groupId>com.example</groupId>
                <artifactId>core</artifactId>
                <version>${project.version}</version>
            </dependency>
        </dependencies>
    </project>"""

    def test_in_memory_parent(self):
        reader = InMemoryFileReader({"/workspace/pom.xml": self.PARENT})
        records = MavenResolver(reader=reader).resolve(self.CHILD, pom_dir="/workspace/child")
        assert [r.version for r in records] == ["2.15.0", "child", "5.0.0"]

    def test_parent_ignored_without_directory(self):
        reader = InMemoryFileReader({"/workspace/pom.xml": self.PARENT})
        records = MavenResolver(reader=reader).resolve(self.CHILD)
        assert records[0].version == "${jackson.version}"

    def test_nearer_ancestor_property_wins(self):
        """Grandparent X=1, parent X=2: the child's ${X} resolves to 2."""
        grandparent = """<project>
            <groupId>com.example</groupId><artifactId>grandparent</artifactId><version>1.0</version>
            <properties><X>1</X></properties>
        </project>"""
        parent = """<project>
            <parent><groupId>com.example</groupId><artifactId>grandparent</artifactId><version>1.0</version></parent>
            <artifactId>parent</artifactId>
            <properties><X>2</X></properties>
        </project>"""
        child = """<project>
            <parent><groupId>com.example</groupId><artifactId>parent</artifactId><version>1.0</version></parent>
            <artifactId>child</artifactId>
            <dependencies><dependency>
                <groupId>com.example</groupId><artifactId>lib</artifactId><version>${X}</version>
            </dependency></dependencies>
        </project>"""
        reader = InMemoryFileReader({
            "/repo/pom.xml": grandparent,
            "/repo/parent/pom.xml": parent,
        })

        records = MavenResolver(reader=reader).resolve(child, pom_dir="/repo/parent/child")
        assert [r.version for r in records] == ["2"]

    def test_local_filesystem_parent(self, tmp_path):
        (tmp_path / "pom.xml").write_text(self.PARENT)
        child_dir = tmp_path / "child"
        child_dir.mkdir()

        records = MavenResolver(reader=LocalFileReader()).resolve(self.CHILD, pom_dir=str(child_dir))
        assert records[0].version == "2.15.0"


class TestDiagnostics:
    """Test resolve_with_diagnostics."""

    def test_malformed_descriptor_yields_empty_list(self):
        assert MavenResolver().resolve("<project><dependencies>") == []

    def test_unencodable_text_yields_empty_list(self):
        """A str holding a lone surrogate is reported as malformed, not raised."""
        content = "<project><groupId>g</groupId><artifactId>a</artifactId><name>\udc80</name></project>"
        result = MavenResolver().resolve_with_diagnostics(content)
        assert result.dependencies == []
        assert result.warnings[0].stage == WarningStage.PARSE
        assert MavenResolver().resolve(content) == []

    def test_declared_encoding_ignored_for_text(self):
        """Already-decoded text keeps its non-ASCII characters."""
        content = """<?xml version="1.0" encoding="ISO-8859-1"?>
        <project>
            <groupId>g</groupId><artifactId>a</artifactId>
            <properties><v>1.0-café</v></properties>
            <dependencies><dependency>
                <groupId>g</groupId><artifactId>b</artifactId><version>${v}</version>
            </dependency></dependencies>
        </project>"""
        assert MavenResolver().resolve(content)[0].version == "1.0-café"

    def test_malformed_descriptor_warning(self):
        result = MavenResolver().resolve_with_diagnostics("not xml", source_file="pom.xml")
        assert result.dependencies == []
        assert len(result.warnings) == 1
        assert result.warnings[0].stage == WarningStage.PARSE
        assert result.warnings[0].path == "pom.xml"

    def test_unresolved_placeholder_warning(self):
        content = """<project><groupId>g</groupId><artifactId>a</artifactId>
            <dependencies><dependency>
                <groupId>g</groupId><artifactId>b</artifactId><version>${nowhere}</version>
            </dependency></dependencies></project>"""
        result = MavenResolver().resolve_with_diagnostics(content)
        assert result.dependencies[0].version == "${nowhere}"
        assert result.warnings[0].stage == WarningStage.PROPERTIES
        assert result.to_dict()["warnings"][0]["details"] == {"name": "g:b", "version": "${nowhere}"}

    def test_missing_parent_warning(self):
        content = """<project>
            <parent><groupId>g</groupId><artifactId>p</artifactId><version>1</version></parent>
            <artifactId>a</artifactId>
        </project>"""
        result = MavenResolver(reader=InMemoryFileReader()).resolve_with_diagnostics(content, pom_dir="/x/y")
        assert result.dependencies == []
        assert [w.stage for w in result.warnings] == [WarningStage.PARENT_CHAIN]

    def test_project_info(self):
        resolver = MavenResolver()
        assert resolver.project_info(SPRING_POM).artifact_id == "demo"
        assert resolver.project_info("<broken") is None


@pytest.mark.parametrize("content", [SPRING_POM, PROFILES_POM, PLUGIN_POM])
def test_resolution_is_deterministic(content):
    resolver = MavenResolver()
    first = [r.to_dict() for r in resolver.resolve(content)]
    second = [r.to_dict() for r in resolver.resolve(content)]
    assert first == second
