#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exception types raised by md2fxml.

Every error the package raises on purpose derives from :class:`Md2FxmlError`,
so callers can catch one type around a whole conversion. The subclasses tell
apart where a conversion went wrong: bad options, markdown the parser could
not tokenize, an AST the renderer refuses, markup the widget loader rejects,
or a code payload that no longer decodes.

Exception Hierarchy
-------------------
- Md2FxmlError (base exception)

  - ValidationError (bad arguments or option values)
    - InvalidOptionsError (options object of the wrong class)

  - ParsingError (markdown tokenization failures)

  - RenderingError (markup generation failures)
    - StructuralConsistencyError (table constructs outside their ancestor chain)

  - MarkupLoadError (emitted markup rejected by the widget loader)

  - PayloadIntegrityError (encoded payload cannot be decoded)

  - DependencyError (a required package is absent or too old)

"""

from typing import Any


class Md2FxmlError(Exception):
    """Root of the md2fxml exception hierarchy.

    Parameters
    ----------
    message : str
        What went wrong, suitable for showing to a user
    original_error : Exception, optional
        Lower-level exception this error wraps

    Attributes
    ----------
    message : str
        Same as ``str(error)``
    original_error : Exception or None
        The wrapped exception, kept for debugging

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2FxmlError):
    """A caller-supplied argument or option value is not acceptable.

    Parameters
    ----------
    message : str
        What is wrong with the value
    parameter_name : str, optional
        Argument or option field that was rejected
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        Lower-level exception this error wraps

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A parser or renderer was handed options meant for a different component.

    Parameters
    ----------
    converter_name : str
        Short name of the parser or renderer, e.g. ``"fxml"``
    expected_type : type
        Options class the component accepts
    received_type : type
        Options class it was given
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2FxmlError):
    """Markdown could not be turned into an AST.

    ``parsing_stage`` names the step that failed (``"tokenize"`` when mistune
    itself raised).
    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2FxmlError):
    """The renderer could not produce markup for a document.

    ``rendering_stage`` names the part of the renderer that gave up, e.g.
    ``"table"`` or ``"context"``.
    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class StructuralConsistencyError(RenderingError):
    """Exception raised when the AST breaks the table ancestor-chain invariant.

    A table cell must sit under Cell -> Row -> (Head | Body) -> Block, and no
    row may claim a column beyond those established by the rows before it.
    The upstream parser violated its own grammar when this is raised, so the
    whole render is aborted.

    Parameters
    ----------
    message : str
        Description of the violation
    node_kind : str, optional
        Kind of the offending node (e.g., "TableRow", "TableCell")

    """

    def __init__(self, message: str, node_kind: str | None = None, original_error: Exception | None = None):
        """Initialize the structural consistency error."""
        super().__init__(message, rendering_stage="table", original_error=original_error)
        self.node_kind = node_kind


class MarkupLoadError(Md2FxmlError):
    """Exception raised when the widget loader rejects emitted markup.

    The cause is deterministic (a generation bug), so callers should not retry.

    Parameters
    ----------
    message : str
        Description of the load failure
    original_error : Exception, optional
        The loader exception that caused this error

    """


class PayloadIntegrityError(Md2FxmlError):
    """Exception raised when an encoded payload fails to decode.

    Payloads produced by the renderer always decode, so this indicates a
    mismatch between generation and decoding.

    Parameters
    ----------
    message : str
        Description of the decode failure
    payload : str, optional
        The offending payload, truncated for display

    """

    def __init__(self, message: str, payload: str | None = None, original_error: Exception | None = None):
        """Initialize the payload integrity error."""
        super().__init__(message, original_error)
        self.payload = payload[:64] if payload else payload


class DependencyError(Md2FxmlError):
    """A component needs a package that is not installed or is too old.

    The generated message ends with a ready-to-run ``pip install`` line, also
    kept in ``install_command``.

    Parameters
    ----------
    converter_name : str
        Component that declared the requirement, e.g. ``"loader"``
    missing_packages : list[tuple[str, str]]
        ``(distribution, version_spec)`` for every package that failed to import
    version_mismatches : list[tuple[str, str, str]], optional
        ``(distribution, version_spec, installed_version)`` for packages that
        imported but do not satisfy their version spec
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: Exception | None = None,
    ):
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches or []

        if message is None:
            parts = [f"'{converter_name}' requires additional packages."]
            if missing_packages:
                names = ", ".join(f"{pkg}{spec}" for pkg, spec in missing_packages)
                parts.append(f"Missing: {names}.")
            for pkg, required, installed in self.version_mismatches:
                parts.append(f"{pkg} {required} required, {installed} installed.")
            packages = " ".join(f'"{pkg}{spec}"' for pkg, spec in missing_packages)
            packages += "".join(f' "{pkg}{required}"' for pkg, required, _ in self.version_mismatches)
            self.install_command = f"pip install {packages.strip()}"
            parts.append(f"Install with: {self.install_command}")
            message = " ".join(parts)
        else:
            self.install_command = ""

        super().__init__(message, original_import_error)
