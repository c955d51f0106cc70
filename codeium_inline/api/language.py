# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Language enum sent to the language server and editor language id lookup."""

from enum import IntEnum


class Language(IntEnum):
    """Language values understood by the language server."""

    UNSPECIFIED = 0
    C = 1
    CLOJURE = 2
    COFFEESCRIPT = 3
    CPP = 4
    CSHARP = 5
    CSS = 6
    CUDACPP = 7
    DOCKERFILE = 8
    GO = 9
    GROOVY = 10
    HANDLEBARS = 11
    HASKELL = 12
    HCL = 13
    HTML = 14
    INI = 15
    JAVA = 16
    JAVASCRIPT = 17
    JSON = 18
    JULIA = 19
    KOTLIN = 20
    LATEX = 21
    LESS = 22
    LUA = 23
    MAKEFILE = 24
    MARKDOWN = 25
    OBJECTIVEC = 26
    OBJECTIVECPP = 27
    PERL = 28
    PHP = 29
    PLAINTEXT = 30
    PROTOBUF = 31
    PBTXT = 32
    PYTHON = 33
    R = 34
    RUBY = 35
    RUST = 36
    SASS = 37
    SCALA = 38
    SCSS = 39
    SHELL = 40
    SQL = 41
    STARLARK = 42
    SWIFT = 43
    TSX = 44
    TYPESCRIPT = 45
    VISUALBASIC = 46
    VUE = 47
    XML = 48
    XSL = 49
    YAML = 50
    SVELTE = 51
    TOML = 52
    DART = 53
    RST = 54
    OCAML = 55
    CMAKE = 56
    PASCAL = 57
    ELIXIR = 58
    FSHARP = 59
    LISP = 60
    MATLAB = 61
    POWERSHELL = 62
    SOLIDITY = 63
    ADA = 64
    OCAML_INTERFACE = 65


# Editor language ids (VS Code / Monaco naming) to language server values
LANGUAGE_IDS: dict[str, Language] = {
    "c": Language.C,
    "clojure": Language.CLOJURE,
    "coffeescript": Language.COFFEESCRIPT,
    "cpp": Language.CPP,
    "csharp": Language.CSHARP,
    "css": Language.CSS,
    "cuda-cpp": Language.CUDACPP,
    "dockerfile": Language.DOCKERFILE,
    "go": Language.GO,
    "groovy": Language.GROOVY,
    "handlebars": Language.HANDLEBARS,
    "haskell": Language.HASKELL,
    "terraform": Language.HCL,
    "hcl": Language.HCL,
    "html": Language.HTML,
    "ini": Language.INI,
    "java": Language.JAVA,
    "javascript": Language.JAVASCRIPT,
    "javascriptreact": Language.JAVASCRIPT,
    "json": Language.JSON,
    "jsonc": Language.JSON,
    "julia": Language.JULIA,
    "kotlin": Language.KOTLIN,
    "latex": Language.LATEX,
    "less": Language.LESS,
    "lua": Language.LUA,
    "makefile": Language.MAKEFILE,
    "markdown": Language.MARKDOWN,
    "objective-c": Language.OBJECTIVEC,
    "objective-cpp": Language.OBJECTIVECPP,
    "perl": Language.PERL,
    "php": Language.PHP,
    "plaintext": Language.PLAINTEXT,
    "proto": Language.PROTOBUF,
    "protobuf": Language.PROTOBUF,
    "pbtxt": Language.PBTXT,
    "python": Language.PYTHON,
    "r": Language.R,
    "ruby": Language.RUBY,
    "rust": Language.RUST,
    "sass": Language.SASS,
    "scala": Language.SCALA,
    "scss": Language.SCSS,
    "shellscript": Language.SHELL,
    "shell": Language.SHELL,
    "bash": Language.SHELL,
    "sql": Language.SQL,
    "starlark": Language.STARLARK,
    "swift": Language.SWIFT,
    "typescriptreact": Language.TSX,
    "typescript": Language.TYPESCRIPT,
    "vb": Language.VISUALBASIC,
    "vue": Language.VUE,
    "xml": Language.XML,
    "xsl": Language.XSL,
    "yaml": Language.YAML,
    "svelte": Language.SVELTE,
    "toml": Language.TOML,
    "dart": Language.DART,
    "restructuredtext": Language.RST,
    "ocaml": Language.OCAML,
    "cmake": Language.CMAKE,
    "pascal": Language.PASCAL,
    "elixir": Language.ELIXIR,
    "fsharp": Language.FSHARP,
    "lisp": Language.LISP,
    "matlab": Language.MATLAB,
    "powershell": Language.POWERSHELL,
    "solidity": Language.SOLIDITY,
    "ada": Language.ADA,
    "ocaml_interface": Language.OCAML_INTERFACE,
}


def language_id_to_enum(language_id: str) -> Language:
    """Map an editor language id to the language server enum.

    Unknown ids map to Language.UNSPECIFIED.
    """
    return LANGUAGE_IDS.get(language_id.lower(), Language.UNSPECIFIED)
