"""Tests for the component and element type registries."""

import pytest

from gltf_accessors.model import (
    ComponentType,
    ElementType,
    UnknownComponentTypeError,
    UnknownElementTypeError,
    component_type_for,
    element_type_for,
)


def describe_component_types():
    def has_gl_constants(expect):
        expect(int(ComponentType.UNSIGNED_BYTE)) == 5121
        expect(int(ComponentType.UNSIGNED_SHORT)) == 5123
        expect(int(ComponentType.UNSIGNED_INT)) == 5125
        expect(int(ComponentType.FLOAT)) == 5126

    def has_byte_sizes(expect):
        expect(ComponentType.BYTE.size) == 1
        expect(ComponentType.UNSIGNED_BYTE.size) == 1
        expect(ComponentType.SHORT.size) == 2
        expect(ComponentType.UNSIGNED_SHORT.size) == 2
        expect(ComponentType.INT.size) == 4
        expect(ComponentType.UNSIGNED_INT.size) == 4
        expect(ComponentType.FLOAT.size) == 4

    def has_display_names(expect):
        expect(ComponentType.UNSIGNED_SHORT.display_name) == "unsigned short"
        expect(ComponentType.FLOAT.display_name) == "float"

    def resolves_constants_and_names(expect):
        expect(component_type_for(5126)) == ComponentType.FLOAT
        expect(component_type_for("5123")) == ComponentType.UNSIGNED_SHORT
        expect(component_type_for("unsigned_int")) == ComponentType.UNSIGNED_INT
        expect(component_type_for("unsigned short")) == ComponentType.UNSIGNED_SHORT
        expect(component_type_for(ComponentType.BYTE)) == ComponentType.BYTE

    def rejects_unknown_values(expect):
        with pytest.raises(UnknownComponentTypeError) as exinfo:
            component_type_for(5130)
        expect(exinfo.value.value) == 5130

        with pytest.raises(UnknownComponentTypeError):
            component_type_for("double")

        with pytest.raises(UnknownComponentTypeError):
            component_type_for(True)


def describe_element_types():
    def has_component_counts(expect):
        expect(ElementType.SCALAR.component_count) == 1
        expect(ElementType.VEC2.component_count) == 2
        expect(ElementType.VEC3.component_count) == 3
        expect(ElementType.VEC4.component_count) == 4
        expect(ElementType.MAT2.component_count) == 4
        expect(ElementType.MAT3.component_count) == 9
        expect(ElementType.MAT4.component_count) == 16

    def resolves_names(expect):
        expect(element_type_for("SCALAR")) == ElementType.SCALAR
        expect(element_type_for("VEC3")) == ElementType.VEC3
        expect(element_type_for(ElementType.MAT4)) == ElementType.MAT4

    def rejects_unknown_names(expect):
        with pytest.raises(UnknownElementTypeError) as exinfo:
            element_type_for("VEC5")
        expect(exinfo.value.name) == "VEC5"
        expect("VEC5" in str(exinfo.value)) == True

    def names_are_case_sensitive(expect):
        with pytest.raises(UnknownElementTypeError):
            element_type_for("vec3")

    def errors_are_value_errors(expect):
        with pytest.raises(ValueError):
            element_type_for("")
