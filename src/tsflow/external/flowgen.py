"""flowgen compiler bridge (TypeScript declarations → Flow).

flowgen is a Node library; it is driven through `node` with the declaration
text on stdin. It must be resolvable from `cwd` (for example installed in the
project's node_modules).
"""

from __future__ import annotations

from pathlib import Path

from ._process import run_tool

_COMPILE_SCRIPT = """\
const { compiler } = require("flowgen");
let source = "";
process.stdin.setEncoding("utf8");
process.stdin.on("data", (chunk) => { source += chunk; });
process.stdin.on("end", () => {
  process.stdout.write(compiler.compileDefinitionString(source));
});
"""


def flowgen_compile(text: str, *, node: str = "node", cwd: str | Path | None = None) -> str:
    """Compile one `.d.ts` document to Flow declarations."""
    return run_tool([node, "-e", _COMPILE_SCRIPT], input_text=text, cwd=cwd)
