"""Static content shipped with the viewer."""

from term_resume.content.resume import build_resume, banner_text, PROMPT

__all__ = ["build_resume", "banner_text", "PROMPT"]
