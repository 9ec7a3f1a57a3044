"""UnitChecker using mypy for type analysis.

Unit tags are phantom type parameters, so a unit mismatch is an ordinary type
error as far as mypy is concerned. This module runs a mypy build over client code
and turns the relevant diagnostics into ``UnitCheckerError`` records, with the
unit types rendered as dimensions (``Quantity[Rate[Meters, Seconds]]`` becomes
``m.s^-1``).
"""

import logging
import re
from contextlib import suppress
from graphlib import TopologicalSorter
from pathlib import Path

from mypy.build import BuildResult, BuildSource, State, build
from mypy.nodes import MypyFile, Var
from mypy.options import Options
from mypy.types import Instance, get_proper_type

from ..units import Dimension
from ..units.dimension import UNIT_CONTAINERS
from . import errors

log = logging.getLogger(__name__)

_ERROR_LINE = re.compile(
    r"^(?P<file>.+?):(?P<line>\d+): error: (?P<message>.*?)(?:  \[(?P<code>[a-z-]+)\])?$"
)
_OPERATOR = re.compile(
    r'Unsupported operand types for (?P<op>\S+) \("(?P<left>[^"]+)" and "(?P<right>[^"]+)"\)'
)
_ARGUMENT = re.compile(
    r'Argument (?P<index>\d+|"[^"]+") to "(?P<func>[^"]+)"(?: of "[^"]+")? '
    r'has incompatible type "(?P<got>[^"]+)"; expected "(?P<expected>[^"]+)"'
)
_RETURN = re.compile(
    r'Incompatible return value type \(got "(?P<got>[^"]+)", expected "(?P<expected>[^"]+)"\)'
)
_ASSIGNMENT = re.compile(
    r'Incompatible types in assignment \(expression has type "(?P<got>[^"]+)", '
    r'variable has type "(?P<expected>[^"]+)"\)'
)
_CANNOT_INFER = re.compile(
    r'Cannot infer (?:type argument \d+|value of type parameter "[^"]+") of "(?P<func>[^"]+)"'
)
_UNIT_TYPE = re.compile(rf"\b(?:{'|'.join(sorted(UNIT_CONTAINERS))})\[")

COMPARISON_OPERATORS = frozenset({"<", "<=", ">", ">="})

# directory holding the math_units package, so client code can import it
_LIBRARY_ROOT = Path(__file__).resolve().parents[2]


def render_unit(type_text: str) -> str:
    """Render a type as printed by mypy as a dimension string where possible."""
    try:
        return str(Dimension.from_type_expression(type_text))
    except ValueError:
        return type_text


class UnitChecker:
    """Uses a mypy build to find and describe unit errors."""

    @staticmethod
    def _find_py_files_and_modules(paths: list[Path]) -> list[tuple[Path, str]]:
        """Find all Python files with module names from a list of paths.

        Returns:
            List of tuples: (absolute file path, module name)
        """
        result: list[tuple[Path, str]] = []
        for input_path in paths:
            input_path = input_path.resolve()
            if input_path.is_file() and input_path.suffix == ".py":
                result.append((input_path, UnitChecker._module_name_from_path(input_path)))
            elif input_path.is_dir():
                for file_path in sorted(input_path.rglob("*.py")):
                    file_path = file_path.resolve()
                    result.append(
                        (file_path, UnitChecker._module_name_from_path(file_path))
                    )
        return result

    @staticmethod
    def _module_name_from_path(file_path: Path) -> str:
        """Compute the module name for a Python file, including all parent packages.

        For __init__.py, returns the package name.
        """
        if file_path.name == "__init__.py":
            parts = []
        else:
            parts = [file_path.with_suffix("").name]
        current = file_path.parent
        while (current / "__init__.py").exists():
            parts.insert(0, current.name)
            current = current.parent
        return ".".join(parts)

    @staticmethod
    def topological_sort_modules(
        graph: dict[str, State], requested_modules: list[str]
    ) -> list[str]:
        """Return a list of module names sorted in dependency order."""
        ts: TopologicalSorter[str] = TopologicalSorter()
        for mod, state in graph.items():
            if mod not in requested_modules:
                continue
            deps = [dep for dep in state.dependencies if dep in graph]
            ts.add(mod, *deps)
        return list(ts.static_order())

    def __init__(self) -> None:
        """Initialise a new checker."""
        self.errors: list[errors.UnitCheckerError] = []
        self.units: dict[str, str] = {}
        self.modules: list[str] = []

    def check(self, paths: list[Path]) -> None:
        """Run unit checks on the given file(s) or directory(ies).

        Errors are appended to ``errors`` ordered by module dependency and line;
        the dimension of every module-level quantity is recorded in ``units``.

        Args:
            paths: List of file or directory paths to analyze.
        """
        files_and_modules = self._find_py_files_and_modules(paths)
        requested_modules = [module_name for _, module_name in files_and_modules]
        top_level_modules = self._get_top_level_modules(requested_modules)
        build_result = self._mypy_build(files_and_modules)
        module_order = self.topological_sort_modules(
            build_result.graph, requested_modules
        )
        self.modules = self._get_modules_for_unit_analysis(
            module_order, top_level_modules
        )
        log.debug("Checking modules in order: %s", self.modules)

        paths_by_module = {
            module_name: file_path for file_path, module_name in files_and_modules
        }
        errors_by_path = self._parse_errors(build_result.errors)
        for module_name in self.modules:
            self._collect_units(build_result.files[module_name], module_name)
            file_errors = errors_by_path.get(paths_by_module[module_name], [])
            self.errors.extend(sorted(file_errors, key=lambda error: error.lineno))

    @staticmethod
    def _mypy_build(files_and_modules: list[tuple[Path, str]]) -> BuildResult:
        options = Options()
        options.incremental = False
        options.show_traceback = True
        options.namespace_packages = True
        options.ignore_missing_imports = True
        options.follow_imports = "silent"
        options.allow_untyped_globals = True
        options.check_untyped_defs = True
        options.export_types = True
        options.preserve_asts = True
        options.hide_error_codes = False
        options.show_absolute_path = True

        python_path_roots: set[Path] = set()
        for file_path, module_name in files_and_modules:
            python_path_roots.add(
                Path(*file_path.parts[: -len(module_name.split("."))])
            )
        # an installed copy is found through site-packages, which mypy refuses
        # to see on its search path
        if _LIBRARY_ROOT.name not in ("site-packages", "dist-packages"):
            python_path_roots.add(_LIBRARY_ROOT)
        options.mypy_path = sorted(str(path) for path in python_path_roots)

        sources = [
            BuildSource(str(file), module_name, None)
            for file, module_name in files_and_modules
        ]
        return build(sources=sources, options=options)

    @staticmethod
    def _get_top_level_modules(module_names: list[str]) -> set[str]:
        return {module_name.split(".")[0] for module_name in module_names}

    @staticmethod
    def _get_modules_for_unit_analysis(
        module_order: list[str], top_level_modules: set[str]
    ) -> list[str]:
        return [
            module_name
            for module_name in module_order
            if module_name.split(".")[0] in top_level_modules
        ]

    def _collect_units(self, mypy_file: MypyFile, module_name: str) -> None:
        """Record the dimension of each quantity defined at module level."""
        for name, symbol in mypy_file.names.items():
            node = symbol.node
            if not isinstance(node, Var) or node.fullname != f"{module_name}.{name}":
                continue
            var_type = get_proper_type(node.type)
            if not isinstance(var_type, Instance):
                continue
            with suppress(ValueError):
                self.units[node.fullname] = str(
                    Dimension.from_type_expression(str(var_type))
                )

    @classmethod
    def _parse_errors(
        cls, lines: list[str]
    ) -> dict[Path, list[errors.UnitCheckerError]]:
        """Convert mypy's formatted diagnostics into unit errors, keyed by file."""
        result: dict[Path, list[errors.UnitCheckerError]] = {}
        for line in lines:
            if not (found := _ERROR_LINE.match(line)):
                continue
            path = found["file"]
            error = cls._to_unit_error(
                path, int(found["line"]), found["message"], found["code"] or ""
            )
            if error is None:
                log.debug("Ignoring non-unit diagnostic: %s", line)
                continue
            log.debug("Unit error: %r", error)
            result.setdefault(Path(path).resolve(), []).append(error)
        return result

    @staticmethod
    def _to_unit_error(
        path: str, lineno: int, message: str, code: str
    ) -> errors.UnitCheckerError | None:
        """Map one mypy diagnostic to a unit error, or None when it is not about units."""
        match code:
            case "operator" if (found := _OPERATOR.search(message)):
                if not _UNIT_TYPE.search(message):
                    return None
                left, right = render_unit(found["left"]), render_unit(found["right"])
                if found["op"] in COMPARISON_OPERATORS:
                    return errors.u005_error_factory(path, lineno, left, right)
                return errors.u001_error_factory(path, lineno, found["op"], left, right)
            case "arg-type" if (found := _ARGUMENT.search(message)):
                if not _UNIT_TYPE.search(message):
                    return None
                return errors.u003_error_factory(
                    path,
                    lineno,
                    arg_index=found["index"].strip('"'),
                    func_name=found["func"],
                    inferred_unit=render_unit(found["got"]),
                    expected_unit=render_unit(found["expected"]),
                )
            case "return-value" if (found := _RETURN.search(message)):
                if not _UNIT_TYPE.search(message):
                    return None
                return errors.u004_error_factory(
                    path, lineno, render_unit(found["got"]), render_unit(found["expected"])
                )
            case "assignment" if (found := _ASSIGNMENT.search(message)):
                if not _UNIT_TYPE.search(message):
                    return None
                return errors.u010_error_factory(
                    path, lineno, render_unit(found["expected"]), render_unit(found["got"])
                )
            case "misc" if (found := _CANNOT_INFER.search(message)):
                return errors.u012_error_factory(
                    path, lineno, f"no consistent units for \"{found['func']}\""
                )
        return None
