"""Import/export rewrite rules (TypeScript-flavoured output → Flow module syntax).

Every rule is a whole-document, line-anchored regex substitution. Rules run in
the fixed order of `RULES`; later rules rely on earlier ones having normalized
the import shapes:

1. `import-require`    `import x = require(y);`   → `import type * as x from y;`
2. `import-default`    `import x from y;`         → `import type * as x from y;`
3. `import-star`       `import * as x from y;`    → `import type * as x from y;`
4. `import-named`      `import { a } from y;`     → `import type { a } from y;`
5. `export-type`       `export type|interface`    → `declare export type|interface`
6. `relative-imports`  `from "./x"`               → `from "<package>/x"`

Leading indentation, an optional trailing `;` and a CRLF line ending are
preserved. Matches never span lines. Rules 1-4 do not match lines already in
`import type …` form, so applying the chain twice is a no-op for those shapes.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .model import PackageContext
from .paths import is_relative, module_name, resolve_module_id

_IDENT = r"[A-Za-z_$][\w$]*"
_TAIL = r"[ \t]*(?P<semi>;?)[ \t]*(?P<cr>\r?)$"


@dataclass(frozen=True)
class RewriteScope:
    """What a rule may know about the file being rewritten."""

    context: PackageContext
    output_path: Path


@dataclass(frozen=True)
class RewriteRule:
    name: str
    pattern: re.Pattern[str]
    replace: Callable[[re.Match[str], RewriteScope], str]

    def apply(self, text: str, scope: RewriteScope) -> str:
        return self.pattern.sub(lambda m: self.replace(m, scope), text)


def _type_namespace_import(m: re.Match[str], scope: RewriteScope) -> str:
    indent, name, target, semi, cr = m.group("indent", "name", "target", "semi", "cr")
    return f"{indent}import type * as {name} from {target}{semi}{cr}"


def _type_named_import(m: re.Match[str], scope: RewriteScope) -> str:
    indent, names, target, semi, cr = m.group("indent", "names", "target", "semi", "cr")
    names = names.strip()
    braces = f"{{ {names} }}" if names else "{}"
    return f"{indent}import type {braces} from {target}{semi}{cr}"


def _declared_export(m: re.Match[str], scope: RewriteScope) -> str:
    return f"{m.group('indent')}declare export {m.group('kind')}"


def _rerooted_import(m: re.Match[str], scope: RewriteScope) -> str:
    specifier = m.group("path")
    if not is_relative(specifier):
        return m.group(0)
    resolved = os.path.normpath(os.path.join(os.path.dirname(str(scope.output_path)), specifier))
    module_id = resolve_module_id(scope.context.package_dir, resolved)
    target = module_name(scope.context.package_name, module_id)
    return f'{m.group("head")}"{target}"{m.group("tail")}'


IMPORT_REQUIRE = RewriteRule(
    name="import-require",
    pattern=re.compile(
        rf"^(?P<indent>[ \t]*)import[ \t]+(?P<name>{_IDENT})[ \t]*=[ \t]*require\((?P<target>[^\r\n]*)\)" + _TAIL,
        re.MULTILINE,
    ),
    replace=_type_namespace_import,
)

IMPORT_DEFAULT = RewriteRule(
    name="import-default",
    pattern=re.compile(
        rf"^(?P<indent>[ \t]*)import[ \t]+(?P<name>{_IDENT})[ \t]+from[ \t]+(?P<target>[^\r\n]*?)" + _TAIL,
        re.MULTILINE,
    ),
    replace=_type_namespace_import,
)

IMPORT_STAR = RewriteRule(
    name="import-star",
    pattern=re.compile(
        rf"^(?P<indent>[ \t]*)import[ \t]*\*[ \t]*as[ \t]+(?P<name>{_IDENT})[ \t]+from[ \t]+(?P<target>[^\r\n]*?)" + _TAIL,
        re.MULTILINE,
    ),
    replace=_type_namespace_import,
)

IMPORT_NAMED = RewriteRule(
    name="import-named",
    pattern=re.compile(
        r"^(?P<indent>[ \t]*)import[ \t]*\{(?P<names>[^\r\n]*)\}[ \t]*from[ \t]+(?P<target>[^\r\n]*?)" + _TAIL,
        re.MULTILINE,
    ),
    replace=_type_named_import,
)

EXPORT_TYPE = RewriteRule(
    name="export-type",
    pattern=re.compile(r"^(?P<indent>[ \t]*)export[ \t]+(?P<kind>type|interface)\b", re.MULTILINE),
    replace=_declared_export,
)

RELATIVE_IMPORTS = RewriteRule(
    name="relative-imports",
    pattern=re.compile(
        r"^(?P<head>[ \t]*import[ \t]+.*?[ \t]*\bfrom[ \t]*)(?P<quote>[\"'])(?P<path>[^\"'\r\n]*)(?P=quote)(?P<tail>[ \t]*;?[ \t]*\r?)$",
        re.MULTILINE,
    ),
    replace=_rerooted_import,
)

RULES: tuple[RewriteRule, ...] = (
    IMPORT_REQUIRE,
    IMPORT_DEFAULT,
    IMPORT_STAR,
    IMPORT_NAMED,
    EXPORT_TYPE,
    RELATIVE_IMPORTS,
)

# flowgen cannot parse `import x = require(...)`, so that form is rewritten
# before compilation as well.
PRE_COMPILE_RULES: tuple[RewriteRule, ...] = (IMPORT_REQUIRE,)


def rewrite(
    text: str,
    *,
    context: PackageContext,
    output_path: str | Path,
    rules: tuple[RewriteRule, ...] = RULES,
) -> str:
    """Apply `rules` in order to the whole of `text`."""
    scope = RewriteScope(context=context, output_path=Path(output_path))
    for rule in rules:
        text = rule.apply(text, scope)
    return text
