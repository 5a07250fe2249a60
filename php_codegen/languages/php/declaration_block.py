"""
Builder for a single PHP declaration.

PhpDeclarationBlock accumulates the header (kind, name, modifiers, parents),
members, methods, nested declarations and free trailing text of one class,
interface or enum, and renders them as exact, format-stable text. Setters
return the block itself so a declaration can be configured in one chain::

    PhpDeclarationBlock().as_kind(Kind.CLASS).with_name("User") \\
        .add_class_member("id", "int", None, access=Access.PRIVATE).render()

Rendering performs no validation: whatever was configured is printed.
"""

import textwrap
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

ANNOTATION_MARKER = "@"


class Access(Enum):
    """Visibility modifiers. NONE renders nothing."""

    PRIVATE = "private"
    PUBLIC = "public"
    PROTECTED = "protected"
    NONE = ""


class Kind(Enum):
    """Kinds of declarations with a header."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"


@dataclass
class MemberFlags:
    final: bool = False
    static: bool = False


@dataclass
class ClassMember:
    """A property, or a method argument when used inside ClassMethod.args."""

    name: str = ""
    type: str = ""
    value: Optional[str] = None
    annotations: List[str] = field(default_factory=list)
    access: Union[Access, str, None] = Access.NONE
    flags: MemberFlags = field(default_factory=MemberFlags)


@dataclass
class ClassMethod:
    name: str
    return_type: Optional[str] = None
    implementation: str = ""
    args: List[ClassMember] = field(default_factory=list)
    return_type_annotations: List[str] = field(default_factory=list)
    access: Union[Access, str, None] = Access.NONE
    flags: MemberFlags = field(default_factory=MemberFlags)
    method_annotations: List[str] = field(default_factory=list)


def transform_comment(comment: Optional[str]) -> str:
    """
    Format a description as a PHP doc comment.

    Single-line text becomes ``/** text */``; multi-line text gets one
    `` * `` prefixed line per source line. The result ends with a newline,
    empty input yields an empty string.
    """
    if not comment:
        return ""

    lines = comment.replace("*/", "*\\/").split("\n")
    if len(lines) == 1:
        return f"/** {lines[0]} */\n"

    return "\n".join(["/**", *(f" * {line}" for line in lines), " */\n"])


def indent_multiline(text: str, indent: str) -> str:
    """Prefix every non-blank line with one indentation level."""
    return "\n".join(indent + line if line.strip() else line for line in text.split("\n"))


def reindent(text: str, indent: str) -> str:
    """Normalize leading whitespace, then indent one level."""
    return indent_multiline(textwrap.dedent(text), indent)


def _access_text(access: Union[Access, str, None]) -> str:
    if isinstance(access, Access):
        return access.value
    return access or ""


def _flags(flags: Optional[MemberFlags]) -> MemberFlags:
    return flags if flags is not None else MemberFlags()


class PhpDeclarationBlock:
    """Mutable builder for one PHP class, interface or enum."""

    def __init__(self, indent: str = "    "):
        """
        Args:
            indent: Text of one nesting level in the rendered body
        """
        self._indent = indent
        self._name: Optional[str] = None
        self._extends: List[str] = []
        self._implements: List[str] = []
        self._kind: Optional[Kind] = None
        self._access: Union[Access, str, None] = Access.NONE
        self._final = False
        self._static = False
        self._block: Optional[str] = None
        self._comment: Optional[str] = None
        self._annotations: List[str] = []
        self._members: List[ClassMember] = []
        self._methods: List[ClassMethod] = []
        self._nested_classes: List["PhpDeclarationBlock"] = []

    def nested_class(self, nested: "PhpDeclarationBlock") -> "PhpDeclarationBlock":
        self._nested_classes.append(nested)
        return self

    def access(self, access: Union[Access, str, None]) -> "PhpDeclarationBlock":
        self._access = access
        return self

    def as_kind(self, kind: Union[Kind, str]) -> "PhpDeclarationBlock":
        self._kind = Kind(kind)
        return self

    def final(self) -> "PhpDeclarationBlock":
        self._final = True
        return self

    def static(self) -> "PhpDeclarationBlock":
        self._static = True
        return self

    def annotate(self, annotations: List[str]) -> "PhpDeclarationBlock":
        self._annotations = list(annotations)
        return self

    def with_comment(self, comment: Optional[str]) -> "PhpDeclarationBlock":
        """Attach a doc comment; empty or None leaves the block uncommented."""
        if comment:
            self._comment = transform_comment(comment)
        return self

    def with_block(self, block: Optional[str]) -> "PhpDeclarationBlock":
        """Set raw text rendered after nested blocks, before the closing brace."""
        self._block = block
        return self

    def extends(self, names: List[str]) -> "PhpDeclarationBlock":
        self._extends = list(names)
        return self

    def implements(self, names: List[str]) -> "PhpDeclarationBlock":
        self._implements = list(names)
        return self

    def with_name(self, name: str) -> "PhpDeclarationBlock":
        self._name = name
        return self

    def add_class_member(
        self,
        name: str,
        type: str,
        value: Optional[str] = None,
        type_annotations: Optional[List[str]] = None,
        access: Union[Access, str, None] = None,
        flags: Optional[MemberFlags] = None,
    ) -> "PhpDeclarationBlock":
        self._members.append(
            ClassMember(
                name=name,
                type=type,
                value=value,
                annotations=list(type_annotations or []),
                access=access,
                flags=_flags(flags),
            )
        )
        return self

    def add_class_method(
        self,
        name: str,
        return_type: Optional[str],
        impl: str,
        args: Optional[List[ClassMember]] = None,
        return_type_annotations: Optional[List[str]] = None,
        access: Union[Access, str, None] = None,
        flags: Optional[MemberFlags] = None,
        method_annotations: Optional[List[str]] = None,
    ) -> "PhpDeclarationBlock":
        self._methods.append(
            ClassMethod(
                name=name,
                return_type=return_type,
                implementation=impl,
                args=list(args or []),
                return_type_annotations=list(return_type_annotations or []),
                access=access,
                flags=_flags(flags),
                method_annotations=list(method_annotations or []),
            )
        )
        return self

    def _print_member(self, member: ClassMember) -> str:
        flags = _flags(member.flags)
        pieces = [
            _access_text(member.access),
            "static" if flags.static else None,
            "final" if flags.final else None,
            *(f"{ANNOTATION_MARKER}{a}" for a in member.annotations or []),
            member.type,
            member.name,
        ]
        text = " ".join(piece for piece in pieces if piece)

        if member.value:
            text += f" = {member.value}"
        return text

    def _print_method(self, method: ClassMethod) -> str:
        flags = _flags(method.flags)
        pieces = [
            *(f"{ANNOTATION_MARKER}{a}\n" for a in method.method_annotations),
            _access_text(method.access),
            "static" if flags.static else None,
            "final" if flags.final else None,
            *(f"{ANNOTATION_MARKER}{a}" for a in method.return_type_annotations),
            method.return_type,
            method.name,
        ]
        signature = " ".join(piece for piece in pieces if piece)
        args = ",".join(self._print_member(arg) for arg in method.args)
        body = indent_multiline(method.implementation, self._indent)

        return f"{signature}({args}) {{\n{body}\n}}"

    def _print_header(self) -> str:
        annotations = ""
        if self._annotations:
            annotations = (
                "\n".join(f"{ANNOTATION_MARKER}{a}" for a in self._annotations) + "\n"
            )

        is_static = " static" if self._static else ""
        final = " final" if self._final else ""
        name = self._name or ""
        extends = f" extends {', '.join(self._extends)}" if self._extends else ""
        implements = (
            f" implements {', '.join(self._implements)}" if self._implements else ""
        )

        return (
            f"{annotations}{_access_text(self._access)}{is_static}{final} "
            f"{self._kind.value} {name}{extends}{implements} "
        )

    def render(self) -> str:
        """Render the declaration. Pure: repeated calls return the same text."""
        header = self._print_header() if self._kind else ""

        members = None
        if self._members:
            members = reindent(
                "\n".join(self._print_member(m) + ";" for m in self._members),
                self._indent,
            )

        methods = None
        if self._methods:
            methods = reindent(
                "\n\n".join(self._print_method(m) for m in self._methods),
                self._indent,
            )

        nested = None
        if self._nested_classes:
            nested = "\n\n".join(
                reindent(c.render().rstrip("\n"), self._indent)
                for c in self._nested_classes
            )

        parts = ["{", members, methods, nested, self._block, "}"]
        body = "\n".join(part for part in parts if part)

        return (self._comment or "") + header + body + "\n"

    def __str__(self) -> str:
        return self.render()
