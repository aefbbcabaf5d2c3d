import unittest
from datetime import datetime

from domain.entities import DocumentReference, ScoredTerm
from infrastructure.rendering.markdown_index_renderer import (
    MarkdownIndexRenderer,
    format_timestamp,
    group_key,
)

GENERATED_AT = datetime(2025, 1, 15, 9, 5)


def make_term(term: str, refs: list[tuple[str, int]], score: float = 1.0) -> ScoredTerm:
    references = tuple(DocumentReference(id=f"{name}.md", display_name=name, count=count) for name, count in refs)
    return ScoredTerm(
        term=term,
        score=score,
        total_occurrences=sum(count for _, count in refs),
        document_refs=references,
    )


class TestMarkdownIndexRenderer(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = MarkdownIndexRenderer()

    def test_single_term_report(self) -> None:
        result = self.renderer.render([make_term("api", [("doc1", 3), ("doc2", 1)])], "Test", GENERATED_AT)
        self.assertEqual(
            result,
            "# Test\n"
            "\n"
            "Generated: 2025-01-15 09:05\n"
            "\n"
            "**1 terms** from vault\n"
            "\n"
            "## A\n"
            "\n"
            "- **api** (4 references)\n"
            "  - [[doc1]] (3)\n"
            "  - [[doc2]] (1)\n",
        )

    def test_reference_lines_follow_scorer_order(self) -> None:
        term = make_term("network", [("doc2", 9), ("doc3", 4), ("doc1", 1)])
        result = self.renderer.render([term], "Vault Index", GENERATED_AT)
        self.assertLess(result.index("[[doc2]]"), result.index("[[doc3]]"))
        self.assertLess(result.index("[[doc3]]"), result.index("[[doc1]]"))

    def test_groups_by_first_letter(self) -> None:
        terms = [make_term("banana", [("a", 1), ("b", 1)]), make_term("apple", [("a", 1), ("b", 1)])]
        result = self.renderer.render(terms, "Vault Index", GENERATED_AT)
        self.assertLess(result.index("## A"), result.index("## B"))

    def test_sorts_alphabetically_within_group_not_by_score(self) -> None:
        terms = [
            make_term("azure", [("a", 5), ("b", 5)], score=9.0),
            make_term("apple", [("a", 1), ("b", 1)], score=0.5),
        ]
        result = self.renderer.render(terms, "Vault Index", GENERATED_AT)
        self.assertLess(result.index("**apple**"), result.index("**azure**"))

    def test_non_letters_share_one_group_first(self) -> None:
        terms = [make_term("api", [("a", 1), ("b", 1)]), make_term("3dprint", [("a", 1), ("b", 1)])]
        result = self.renderer.render(terms, "Vault Index", GENERATED_AT)
        self.assertIn("## #", result)
        self.assertLess(result.index("## #"), result.index("## A"))
        self.assertEqual(group_key("_private"), "#")
        self.assertEqual(group_key("Zebra"), "z")

    def test_empty_report(self) -> None:
        result = self.renderer.render([], "Empty Index", GENERATED_AT)
        self.assertIn("# Empty Index", result)
        self.assertIn("**0 terms**", result)
        self.assertNotIn("## ", result)

    def test_preserves_case(self) -> None:
        result = self.renderer.render([make_term("JavaScript", [("a", 1), ("b", 1)])], "Index", GENERATED_AT)
        self.assertIn("## J", result)
        self.assertIn("- **JavaScript** (2 references)", result)

    def test_timestamp_zero_padding(self) -> None:
        self.assertEqual(format_timestamp(datetime(2025, 3, 5, 8, 9)), "2025-03-05 08:09")
        self.assertEqual(format_timestamp(datetime(2025, 12, 31, 23, 59, 59)), "2025-12-31 23:59")

    def test_output_is_deterministic(self) -> None:
        terms = [make_term(name, [("x", 2), ("y", 1)]) for name in ("delta", "alpha", "charlie", "bravo")]
        self.assertEqual(
            self.renderer.render(terms, "Index", GENERATED_AT),
            self.renderer.render(list(reversed(terms)), "Index", GENERATED_AT),
        )


if __name__ == "__main__":
    unittest.main()
