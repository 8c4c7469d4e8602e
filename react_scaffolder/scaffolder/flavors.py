"""Flavor profiles: the data that distinguishes the two generation paths.

The scaffolder's control flow is identical for both flavors; only the values
defined here differ.  Template names are relative to
``react_scaffolder/scaffolder/templates/``.
"""

from __future__ import annotations

from .models import (
    CommandSpec,
    ConfigPatch,
    ExampleFile,
    Flavor,
    FlavorProfile,
    FolderPlan,
    PackageSet,
    PatchKind,
)

# ---------------------------------------------------------------------------
# Shared values
# ---------------------------------------------------------------------------

FOLDER_PLAN = FolderPlan(
    directories=(
        "src/components/ui",
        "src/components/forms",
        "src/components/layout",
        "src/pages",
        "src/hooks",
        "src/utils",
        "src/services",
        "src/types",
        "src/store",
        "src/contexts",
        "src/assets/images",
        "src/assets/styles",
        "src/lib",
    )
)

MANIFEST_NAME = "package.json"

TAILWIND_INIT = CommandSpec(command="npx", args=("tailwindcss", "init", "-p"))

_TAILWIND_PACKAGES = (
    "tailwindcss",
    "postcss",
    "autoprefixer",
    "@tailwindcss/forms",
    "@tailwindcss/typography",
)

_STATE_AND_FORM_PACKAGES = (
    "zustand",
    "@tanstack/react-query",
    "react-hook-form",
    "@hookform/resolvers",
    "zod",
)

_FORMATTER_PACKAGES = ("prettier", "prettier-plugin-tailwindcss")


# ---------------------------------------------------------------------------
# Classic (create-react-app, TypeScript)
# ---------------------------------------------------------------------------

CLASSIC = FlavorProfile(
    flavor=Flavor.CLASSIC,
    display_name="React",
    generator_commands=(
        CommandSpec(
            command="npx",
            args=("create-react-app", ".", "--template", "typescript"),
            env={"ADBLOCK": "1", "DISABLE_OPENCOLLECTIVE": "1"},
        ),
    ),
    packages=PackageSet(
        runtime=(
            *_TAILWIND_PACKAGES,
            "react-router-dom",
            "axios",
            "styled-components",
            "@types/styled-components",
            "lucide-react",
            "clsx",
            "tailwind-merge",
            *_STATE_AND_FORM_PACKAGES,
            "@types/node",
            *_FORMATTER_PACKAGES,
        ),
    ),
    post_install_commands=(TAILWIND_INIT,),
    example_files=(
        ExampleFile(target="src/hooks/useLocalStorage.ts", template="classic/src/hooks/useLocalStorage.ts.j2"),
        ExampleFile(target="src/utils/helpers.ts", template="classic/src/utils/helpers.ts.j2"),
        ExampleFile(target=".env.example", template="classic/env.example.j2"),
    ),
    config_patches=(
        ConfigPatch(target="tailwind.config.js", template="classic/tailwind.config.js.j2"),
        ConfigPatch(target="src/index.css", template="common/index.css.j2"),
        ConfigPatch(
            target=MANIFEST_NAME,
            kind=PatchKind.MERGE_SCRIPTS,
            scripts={
                "format": "prettier --write .",
                "lint": "eslint src --ext .js,.jsx,.ts,.tsx",
                "build:prod": "npm run build",
                "dev": "npm start",
            },
        ),
    ),
    start_command="npm start",
    capabilities=(
        "Tailwind CSS with Forms & Typography",
        "React Router DOM",
        "Axios for API calls",
        "Zustand for state management",
        "React Query for server state",
        "React Hook Form + Zod for forms",
        "Lucide React for icons",
        "Prettier for formatting",
    ),
    farewell="Happy coding with your enhanced React stack!",
)


# ---------------------------------------------------------------------------
# Vite (create-vite, JavaScript)
# ---------------------------------------------------------------------------

VITE = FlavorProfile(
    flavor=Flavor.VITE,
    display_name="Vite + React",
    generator_commands=(
        CommandSpec(
            command="npm",
            args=("create", "vite@latest", ".", "--", "--template", "react"),
        ),
        CommandSpec(command="npm", args=("install",)),
    ),
    packages=PackageSet(
        dev=(
            *_TAILWIND_PACKAGES,
            "react-router-dom",
            "axios",
            "lucide-react",
            "clsx",
            "tailwind-merge",
            *_STATE_AND_FORM_PACKAGES,
            *_FORMATTER_PACKAGES,
        ),
    ),
    post_install_commands=(TAILWIND_INIT,),
    example_files=(
        ExampleFile(target="src/components/ui/Button.jsx", template="vite/src/components/ui/Button.jsx.j2"),
        ExampleFile(target="src/pages/About.jsx", template="vite/src/pages/About.jsx.j2"),
        ExampleFile(target="src/pages/Contact.jsx", template="vite/src/pages/Contact.jsx.j2"),
        ExampleFile(target="src/pages/Home.jsx", template="vite/src/pages/Home.jsx.j2"),
        ExampleFile(target="src/pages/index.js", template="vite/src/pages/index.js.j2"),
        ExampleFile(target="src/hooks/useLocalStorage.js", template="vite/src/hooks/useLocalStorage.js.j2"),
        ExampleFile(target=".env.example", template="vite/env.example.j2"),
    ),
    config_patches=(
        ConfigPatch(target="tailwind.config.js", template="vite/tailwind.config.js.j2"),
        ConfigPatch(target="postcss.config.js", template="vite/postcss.config.js.j2"),
        ConfigPatch(target="vite.config.js", template="vite/vite.config.js.j2"),
        ConfigPatch(target="src/index.css", template="common/index.css.j2"),
        ConfigPatch(target="src/App.jsx", template="vite/src/App.jsx.j2"),
        ConfigPatch(
            target=MANIFEST_NAME,
            kind=PatchKind.MERGE_SCRIPTS,
            scripts={
                "format": "prettier --write .",
                "lint": "eslint .",
                "build:prod": "npm run build",
                "start": "npm run dev",
            },
        ),
    ),
    start_command="npm run dev",
    capabilities=(
        "⚡ Vite (fast build tool)",
        "⚛️  React",
        "🎨 Tailwind CSS with plugins",
        "🛣️  React Router DOM",
        "🐻 Zustand (state management)",
        "📡 React Query (server state)",
        "📝 React Hook Form + Zod",
        "🔮 Lucide React (icons)",
        "🎯 Axios (HTTP client)",
    ),
    farewell="Happy coding with Vite + React!",
)


PROFILES: dict[Flavor, FlavorProfile] = {
    Flavor.CLASSIC: CLASSIC,
    Flavor.VITE: VITE,
}


def get_profile(flavor: Flavor | str) -> FlavorProfile:
    """Return the profile for *flavor* (an enum member or its value)."""
    return PROFILES[Flavor(flavor)]
