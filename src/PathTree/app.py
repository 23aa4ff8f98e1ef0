"""Streamlit UI for PathTree."""

from __future__ import annotations

import streamlit as st

from PathTree.markdown_renderer import count_nodes, render_markdown
from PathTree.path_parser import parse_paths
from PathTree.tree_builder import build_tree_from_text
from PathTree.tree_renderer import render_tree


def _preloaded_paths() -> str:
    """Path list handed over by the launcher in the ``paths`` query parameter."""
    text = st.query_params.get("paths", "")
    return "\n".join(entry.raw for entry in parse_paths(text))


def main() -> None:
    st.set_page_config(
        page_title="PathTree",
        page_icon="🌳",
        layout="wide",
    )

    st.title("PathTree")
    st.caption("Render a flat list of paths as a tree diagram.")

    preloaded = _preloaded_paths()
    text = st.text_area(
        "Paths (one per line)",
        value=preloaded,
        height=240,
        placeholder="src/\nsrc/main.rs\nsrc/lib.rs",
        help="Directories may end with '/'. A leading './' is ignored.",
    )

    uploaded = st.file_uploader(
        "...or upload a path list",
        type=["txt"],
        help="Overrides the text above when present.",
    )

    render_clicked = st.button(
        "Render",
        type="primary",
        use_container_width=True,
    )

    if render_clicked:
        title = "paths.txt"
        if uploaded is not None:
            try:
                text = uploaded.getvalue().decode("utf-8-sig")
            except UnicodeDecodeError:
                st.error(f"{uploaded.name} is not valid UTF-8.")
                return
            title = uploaded.name
        _run_render(text, title)
    elif preloaded and not st.session_state.get("preloaded_rendered"):
        # First load from the launcher renders without a click.
        st.session_state["preloaded_rendered"] = True
        _run_render(preloaded, "paths.txt")
        return

    # Show previous result after rerun (e.g. download button click)
    if not render_clicked and "result" in st.session_state:
        _show_result(st.session_state["result"])


def _run_render(text: str, title: str) -> None:
    root = build_tree_from_text(text)
    if not root.children:
        st.warning("No paths found in the input.")
        st.session_state.pop("result", None)
        return

    directories, files = count_nodes(root)
    stem = title.rsplit(".", 1)[0] or "tree"

    # Save result to session state so it survives reruns
    st.session_state["result"] = {
        "tree": render_tree(root) + "\n",
        "markdown": render_markdown(title, root),
        "stem": stem,
        "directories": directories,
        "files": files,
    }
    _show_result(st.session_state["result"])


def _show_result(result: dict) -> None:
    """Display the rendered tree and download buttons from a stored result."""
    st.info(f"{result['directories']} directories, {result['files']} files.")

    st.code(result["tree"], language="text")

    left, right = st.columns(2)
    with left:
        st.download_button(
            label="Download text",
            data=result["tree"],
            file_name=f"{result['stem']}_tree.txt",
            mime="text/plain",
            use_container_width=True,
        )
    with right:
        st.download_button(
            label="Download Markdown",
            data=result["markdown"],
            file_name=f"{result['stem']}_tree.md",
            mime="text/markdown",
            use_container_width=True,
        )


if __name__ == "__main__":
    main()
