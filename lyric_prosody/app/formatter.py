"""Human-readable rendering of a lyrics analysis."""

from __future__ import annotations

from typing import List

from lyric_prosody.core.models import ParsedLyrics, Verse


class LyricsReportFormatter:
    """Render parsed lyrics as a per-stanza, per-verse console report."""

    def format_report(self, title: str, lyrics: str, result: ParsedLyrics) -> str:
        lines: List[str] = [
            f"🎵 ANALYZING: {title}",
            "Input lyrics:",
            lyrics,
            "Analysis Results:",
        ]
        if not result.stanzas:
            lines.append("  (no stanzas found)")
        for stanza in result.stanzas:
            lines.append(f"Stanza {stanza.index} (Pattern: {stanza.rhyme_pattern}):")
            for verse in stanza.verses:
                lines.extend(self._format_verse(verse))
        return "\n".join(lines)

    @staticmethod
    def _format_verse(verse: Verse) -> List[str]:
        rhyme_type = verse.rhyme_type or "no match"
        return [
            f'  {verse.index}. [{verse.rhyme_index}] "{verse.text}"',
            f'      └─ Syllable: "{verse.rhyming_syllable}" ({rhyme_type})'
            f" | {verse.syllable_count} syllables",
        ]


__all__ = ["LyricsReportFormatter"]
