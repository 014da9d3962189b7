"""Tests for the generation pipeline."""

import pytest

from primenum.generator import TARGETS, compile_enum, targets
from primenum.generator.errors import (
    DuplicateValueError,
    EnumSyntaxError,
    GenerationError,
    OutOfRangeError,
    UnknownTargetError,
)


def describe_compile_enum():
    def renders_every_target(expect, sample_definition):
        for language in targets():
            code = compile_enum(sample_definition, language)
            expect("MyEnum" in code) == True

    def defaults_to_python(expect):
        expect("class E(IntEnum):" in compile_enum("E u8; A")) == True

    def is_idempotent(expect, sample_definition):
        expect(compile_enum(sample_definition, "c")) == compile_enum(sample_definition, "c")

    def rejects_unknown_target(expect):
        with pytest.raises(UnknownTargetError) as exc:
            compile_enum("E u8; A", "cobol")
        expect(str(exc.value)) == "Unknown language: cobol"

    def propagates_generation_errors(expect):
        with pytest.raises(DuplicateValueError):
            compile_enum("E u8; A = 1, B = 1", "rust")
        with pytest.raises(OutOfRangeError):
            compile_enum("E u8; A = 300", "c")
        with pytest.raises(EnumSyntaxError):
            compile_enum("E u8", "python")

    def shares_a_base_error(expect):
        for text in ["E u8; A = 1, B = 1", "E u8; A = 300", "E u8", "E u8; A, A"]:
            with pytest.raises(GenerationError):
                compile_enum(text)


def describe_targets():
    def lists_supported_languages(expect):
        expect(targets()) == ["python", "rust", "c"]
        expect(sorted(TARGETS)) == ["c", "python", "rust"]
