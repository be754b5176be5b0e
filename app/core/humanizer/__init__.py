"""
Humanizer Services

Template rendering, Gemini generation and the humanization pipeline.
Import from the submodules directly; the prompt store depends on
`app.core.humanizer.errors`.
"""
