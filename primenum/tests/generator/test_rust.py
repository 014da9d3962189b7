"""Tests for Rust code generation."""

import pytest

from primenum.generator import compile_enum
from primenum.generator.errors import ReservedNameError


def describe_declaration():
    def emits_repr_and_derives(expect, sample_definition):
        code = compile_enum(sample_definition, "rust")
        expect("#[repr(u16)]\n#[derive(Debug, Clone, Copy, PartialEq, Eq, Hash)]\n" in code) == True
        expect("pub enum MyEnum {\n" in code) == True

    def binds_resolved_values(expect, sample_definition):
        code = compile_enum(sample_definition, "rust")
        for line in ["    A = 0,", "    B = 1,", "    C = 2,", "    D = 500,", "    E = 501,"]:
            expect(line in code) == True

    def passes_docs_through(expect, sample_definition):
        code = compile_enum(sample_definition, "rust")
        expect("\n/// Some comments about 'MyEnum'\n#[repr(u16)]" in code) == True
        expect("    /// Some special comments about variant C\n    C = 2," in code) == True

    def supports_private_visibility(expect):
        code = compile_enum("E u8; A", "rust", visibility="")
        expect("\nenum E {" in code) == True
        expect("    fn from(x: u8) -> Option<E> {" in code) == True
        expect("pub " in code) == False


def describe_operations():
    def emits_from(expect, sample_definition):
        code = compile_enum(sample_definition, "rust")
        expect("pub fn from(x: u16) -> Option<MyEnum> {" in code) == True
        expect("501 => Some(MyEnum::E)," in code) == True
        expect("_ => None," in code) == True

    def emits_from_name(expect, sample_definition):
        code = compile_enum(sample_definition, "rust")
        expect("pub fn from_name(name: &str) -> Option<MyEnum> {" in code) == True
        expect('"E" => Some(MyEnum::E),' in code) == True

    def emits_list_in_declaration_order(expect):
        code = compile_enum("E u8; C = 5, A = 1, B", "rust")
        body = code[code.index("fn list()"):]
        expect(body.index("E::C,") < body.index("E::A,") < body.index("E::B,")) == True

    def emits_default_when_marked(expect, sample_definition):
        code = compile_enum(sample_definition, "rust")
        expect("impl Default for MyEnum {" in code) == True
        expect("pub fn default() -> MyEnum {\n        MyEnum::C\n    }" in code) == True

    def omits_default_without_marker(expect):
        code = compile_enum("E u8; A, B", "rust")
        expect("default" in code) == False

    def emits_negative_values(expect):
        code = compile_enum("E i64; Min = -9223372036854775808", "rust")
        expect("-9223372036854775808 => Some(E::Min)," in code) == True


def describe_reserved_names():
    def rejects_rust_keywords(expect):
        with pytest.raises(ReservedNameError) as exc:
            compile_enum("E u8; A, Self", "rust")
        expect(exc.value.variant) == "Self"
        expect(exc.value.target) == "rust"

    def allows_python_keywords(expect):
        code = compile_enum("E u8; None, True", "rust")
        expect("    None = 0," in code) == True

    def rejects_reserved_rust_keywords(expect):
        reserved = [
            "abstract", "become", "box", "do", "final", "gen", "macro",
            "override", "priv", "try", "typeof", "unsized", "virtual", "yield",
        ]
        for name in reserved:
            with pytest.raises(ReservedNameError) as exc:
                compile_enum(f"E u8; A, {name}", "rust")
            expect(exc.value.variant) == name

    def rejects_keyword_type_name(expect):
        with pytest.raises(ReservedNameError) as exc:
            compile_enum("yield u8; A", "rust")
        expect(exc.value.variant) == "yield"
