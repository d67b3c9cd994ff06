"""Tests for stage error rendering."""

from __future__ import annotations

import pytest

from ghreport.core.exceptions import GenerateError, SetupError, StageError, StoreError
from ghreport.core.types import Stage
from ghreport.logging_config import REDACTED, register_secret


class TestStageError:
    @pytest.mark.parametrize("cls,prefix", [
        (SetupError, "setup error: "),
        (GenerateError, "generate error: "),
        (StoreError, "store error: "),
    ])
    def test_subclasses_carry_their_stage(self, cls, prefix):
        exc = cls("boom")
        assert str(exc) == f"{prefix}boom"
        assert exc.message == "boom"

    def test_base_class_takes_stage_argument(self):
        exc = StageError("x", Stage.STORE)
        assert exc.stage is Stage.STORE
        assert str(exc) == "store error: x"

    def test_base_class_without_stage_is_rejected(self):
        with pytest.raises(TypeError, match="requires a stage"):
            StageError("x")

    def test_registered_secret_masked(self):
        register_secret("ghp_s3cr3t")
        exc = StoreError("denied for ghp_s3cr3t")
        assert str(exc) == f"store error: denied for {REDACTED}"
