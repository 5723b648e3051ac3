"""Unit tests for the optional operation registry.

Tests cover:
- Registration rules (unique names, dependencies registered first)
- Configuration overrides (overlap and unknown names rejected)
- Run order, disabled skips and dependency skips
- Faults raised by or appended by an effect
"""

import pytest

from src.application.ajax.optional_operations import (
    OperationOutcome,
    OptionalOperation,
    OptionalOperationConfig,
    OptionalOperationConfigurationError,
    OptionalOperationRegistry,
)
from src.application.errors import ErrorAggregator, SystemFault
from tests.utils.recording_logger import RecordingLogger
from tests.utils.utils import make_context

FAULT_MESSAGE = "We were unable to complete your request. Please try again."


class EffectRecorder:
    """Builds effects that log their name when they run."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def effect(self, name: str, *, raises: Exception | None = None):
        async def run(context, errors):
            self.calls.append(name)
            if raises is not None:
                raise raises

        return run


def _prepare_and_sync(recorder: EffectRecorder, **prepare_kwargs) -> OptionalOperationRegistry:
    return OptionalOperationRegistry(
        [
            OptionalOperation(
                name="orderPrepare",
                effect=recorder.effect("orderPrepare", **prepare_kwargs),
                enabled_by_default=True,
            ),
            OptionalOperation(
                name="syncPayment",
                effect=recorder.effect("syncPayment"),
                depends_on=frozenset({"orderPrepare"}),
            ),
        ]
    )


async def _run(registry, config=None, errors=None):
    errors = errors if errors is not None else ErrorAggregator()
    report = await registry.run(
        make_context(),
        errors,
        config or OptionalOperationConfig(),
        fault_message=FAULT_MESSAGE,
        logger=RecordingLogger(),
    )
    return report, errors


@pytest.mark.unit
class TestRegistration:
    """Test registry construction rules."""

    def test_registration_order_is_kept(self):
        recorder = EffectRecorder()
        registry = _prepare_and_sync(recorder)

        assert registry.names == ("orderPrepare", "syncPayment")
        assert len(registry) == 2
        assert "syncPayment" in registry

    def test_duplicate_name_raises(self):
        registry = OptionalOperationRegistry(
            [OptionalOperation(name="a", effect=EffectRecorder().effect("a"))]
        )

        with pytest.raises(OptionalOperationConfigurationError, match="already"):
            registry.register(OptionalOperation(name="a", effect=EffectRecorder().effect("a")))

    def test_unregistered_dependency_raises(self):
        registry = OptionalOperationRegistry()

        with pytest.raises(OptionalOperationConfigurationError, match="unregistered"):
            registry.register(
                OptionalOperation(
                    name="b",
                    effect=EffectRecorder().effect("b"),
                    depends_on=frozenset({"a"}),
                )
            )

    def test_self_dependency_raises(self):
        registry = OptionalOperationRegistry()

        with pytest.raises(OptionalOperationConfigurationError):
            registry.register(
                OptionalOperation(
                    name="a",
                    effect=EffectRecorder().effect("a"),
                    depends_on=frozenset({"a"}),
                )
            )

    def test_failed_registration_leaves_registry_unchanged(self):
        registry = OptionalOperationRegistry()

        with pytest.raises(OptionalOperationConfigurationError):
            registry.register(
                OptionalOperation(
                    name="b",
                    effect=EffectRecorder().effect("b"),
                    depends_on=frozenset({"missing"}),
                )
            )

        assert len(registry) == 0


@pytest.mark.unit
class TestOptionalOperationConfig:
    """Test per-command overrides."""

    def test_overlapping_overrides_raise(self):
        with pytest.raises(OptionalOperationConfigurationError, match="both"):
            OptionalOperationConfig(
                enabled=frozenset({"orderPrepare"}),
                disabled=frozenset({"orderPrepare"}),
            )

    def test_unknown_names_are_rejected_by_registry(self):
        registry = _prepare_and_sync(EffectRecorder())

        with pytest.raises(OptionalOperationConfigurationError, match="Unknown"):
            registry.check_config(OptionalOperationConfig(enabled=frozenset({"nope"})))

    def test_default_applies_without_override(self):
        enabled = OptionalOperation(name="a", effect=EffectRecorder().effect("a"), enabled_by_default=True)
        disabled = OptionalOperation(name="b", effect=EffectRecorder().effect("b"))
        config = OptionalOperationConfig()

        assert config.is_enabled(enabled) is True
        assert config.is_enabled(disabled) is False

    def test_overrides_win_over_defaults(self):
        enabled = OptionalOperation(name="a", effect=EffectRecorder().effect("a"), enabled_by_default=True)
        disabled = OptionalOperation(name="b", effect=EffectRecorder().effect("b"))
        config = OptionalOperationConfig(
            enabled=frozenset({"b"}), disabled=frozenset({"a"})
        )

        assert config.is_enabled(enabled) is False
        assert config.is_enabled(disabled) is True


@pytest.mark.unit
class TestRegistryRun:
    """Test running operations in dependency order."""

    async def test_dependent_runs_after_successful_prerequisite(self):
        recorder = EffectRecorder()
        registry = _prepare_and_sync(recorder)

        report, errors = await _run(
            registry, OptionalOperationConfig(enabled=frozenset({"syncPayment"}))
        )

        assert recorder.calls == ["orderPrepare", "syncPayment"]
        assert report == {
            "orderPrepare": OperationOutcome.SUCCEEDED,
            "syncPayment": OperationOutcome.SUCCEEDED,
        }
        assert errors.has_errors() is False

    async def test_disabled_by_default_operation_is_skipped(self):
        recorder = EffectRecorder()
        registry = _prepare_and_sync(recorder)

        report, errors = await _run(registry)

        assert recorder.calls == ["orderPrepare"]
        assert report["syncPayment"] is OperationOutcome.SKIPPED_DISABLED
        assert errors.has_errors() is False

    async def test_disabled_prerequisite_skips_dependent_without_fault(self):
        recorder = EffectRecorder()
        registry = _prepare_and_sync(recorder)

        report, errors = await _run(
            registry,
            OptionalOperationConfig(
                enabled=frozenset({"syncPayment"}),
                disabled=frozenset({"orderPrepare"}),
            ),
        )

        assert recorder.calls == []
        assert report["orderPrepare"] is OperationOutcome.SKIPPED_DISABLED
        assert report["syncPayment"] is OperationOutcome.SKIPPED_DEPENDENCY
        assert errors.has_errors() is False

    async def test_raising_prerequisite_blocks_dependent(self):
        recorder = EffectRecorder()
        cause = RuntimeError("pricing engine down")
        registry = _prepare_and_sync(recorder, raises=cause)

        report, errors = await _run(
            registry, OptionalOperationConfig(enabled=frozenset({"syncPayment"}))
        )

        assert recorder.calls == ["orderPrepare"]
        assert report["orderPrepare"] is OperationOutcome.FAILED
        assert report["syncPayment"] is OperationOutcome.SKIPPED_DEPENDENCY
        assert errors.system_messages() == [FAULT_MESSAGE]
        fault = errors.system_faults[0]
        assert fault.cause is cause
        assert fault.step == "orderPrepare"

    async def test_effect_appending_fault_counts_as_failed(self):
        calls: list[str] = []

        async def prepare(context, errors):
            calls.append("orderPrepare")
            errors.add_system_fault(SystemFault(message="stale totals"))

        async def sync(context, errors):
            calls.append("syncPayment")

        registry = OptionalOperationRegistry(
            [
                OptionalOperation(name="orderPrepare", effect=prepare, enabled_by_default=True),
                OptionalOperation(
                    name="syncPayment",
                    effect=sync,
                    depends_on=frozenset({"orderPrepare"}),
                    enabled_by_default=True,
                ),
            ]
        )

        report, errors = await _run(registry)

        assert calls == ["orderPrepare"]
        assert report["orderPrepare"] is OperationOutcome.FAILED
        assert errors.system_messages() == ["stale totals"]

    async def test_existing_faults_do_not_fail_operations(self):
        recorder = EffectRecorder()
        registry = _prepare_and_sync(recorder)
        errors = ErrorAggregator()
        errors.add_system_fault(SystemFault(message="execute failed", step="execute"))

        report, _ = await _run(
            registry, OptionalOperationConfig(enabled=frozenset({"syncPayment"})), errors
        )

        assert recorder.calls == ["orderPrepare", "syncPayment"]
        assert report["syncPayment"] is OperationOutcome.SUCCEEDED

    async def test_report_is_read_only(self):
        registry = _prepare_and_sync(EffectRecorder())

        report, _ = await _run(registry)

        with pytest.raises(TypeError):
            report["orderPrepare"] = OperationOutcome.FAILED  # type: ignore[index]
