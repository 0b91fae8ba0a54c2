"""Tests for LoadOptions, ResolverOptions and option coercion."""

from __future__ import annotations

from pathlib import Path

import pytest

from modwire.config import Config
from modwire.errors import ConfigError
from modwire.loading.options import LoadOptions, ResolverOptions, coerce_options, descriptor_options
from modwire.loading.types import ArtifactKind, Lifetime, RegistrationStrategy, ResolvedArtifact


def _artifact(**options: object) -> ResolvedArtifact:
    return ResolvedArtifact(kind=ArtifactKind.DEFAULT, name="foo", value=object, options=dict(options))


class TestResolverOptions:
    def test_register_alias(self) -> None:
        opts = ResolverOptions.model_validate({"register": "function"})
        assert opts.strategy is RegistrationStrategy.FUNCTION

    def test_defaults(self) -> None:
        opts = ResolverOptions()
        assert opts.strategy is None
        assert opts.lifetime is Lifetime.TRANSIENT

    def test_passthrough_excludes_register_and_keeps_extras(self) -> None:
        opts = ResolverOptions.model_validate({"register": "class", "lifetime": "singleton", "scope": "request"})
        passthrough = opts.passthrough()
        assert "strategy" not in passthrough
        assert "register" not in passthrough
        assert passthrough["lifetime"] is Lifetime.SINGLETON
        assert passthrough["scope"] == "request"

    def test_invalid_strategy_rejected(self) -> None:
        with pytest.raises(ConfigError):
            coerce_options({"resolver_options": {"register": "prototype"}})


class TestCoerceOptions:
    def test_none_gives_defaults(self) -> None:
        opts = coerce_options(None)
        assert opts.resolver_options is None
        assert opts.format_name is None
        assert opts.strategy_override is None

    def test_instance_returned_as_is(self) -> None:
        opts = LoadOptions(format_name=str.upper)
        assert coerce_options(opts) is opts

    def test_dict_is_validated(self) -> None:
        opts = coerce_options({"format_name": str.upper, "resolver_options": {"register": "class"}})
        assert opts.format_name("a") == "A"
        assert opts.strategy_override is RegistrationStrategy.CLASS

    def test_non_callable_formatter_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            coerce_options({"format_name": "upper"})
        assert exc_info.value.code == "CONFIG_INVALID"

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(ConfigError, match="mapping"):
            coerce_options(["format_name"])  # type: ignore[arg-type]


class TestDescriptorOptions:
    def test_empty_without_resolver_options(self) -> None:
        assert descriptor_options(LoadOptions(), _artifact()) == {}

    def test_marker_options_win(self) -> None:
        opts = coerce_options({"resolver_options": {"lifetime": "transient", "scope": "app"}})
        merged = descriptor_options(opts, _artifact(lifetime="singleton"))
        assert merged["lifetime"] == "singleton"
        assert merged["scope"] == "app"

    def test_marker_register_is_dropped(self) -> None:
        merged = descriptor_options(LoadOptions(), _artifact(register="class", tag="x"))
        assert merged == {"tag": "x"}


class TestFromConfig:
    def test_empty_config(self) -> None:
        opts = LoadOptions.from_config(Config())
        assert opts.resolver_options is None

    def test_loader_section(self) -> None:
        config = Config({"loader": {"register": "function", "lifetime": "singleton"}})
        opts = LoadOptions.from_config(config)
        assert opts.strategy_override is RegistrationStrategy.FUNCTION
        assert opts.resolver_options.lifetime is Lifetime.SINGLETON

    def test_resolver_options_passthrough(self, tmp_path: Path) -> None:
        f = tmp_path / "modwire.yaml"
        f.write_text("loader:\n  resolver_options:\n    scope: request\n")
        opts = LoadOptions.from_config(Config.from_yaml(f))
        assert opts.resolver_options.passthrough()["scope"] == "request"

    @pytest.mark.parametrize("value", ["singleton", ["a", "b"], 3])
    def test_non_mapping_resolver_options_rejected(self, value: object) -> None:
        config = Config({"loader": {"resolver_options": value}})
        with pytest.raises(ConfigError, match="loader.resolver_options must be a mapping"):
            LoadOptions.from_config(config)
