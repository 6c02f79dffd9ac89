"""Tests for chip labels."""

from trickgraph.sequence.chips import ChipKind, render_text, sequence_to_chips


class TestSequenceToChips:
    def test_labels(self, make_trick, make_arrow):
        chips = sequence_to_chips(
            (
                make_trick("t1", "gainer"),
                make_arrow("a1", "vanish"),
                make_trick("t2", "cork", "complete"),
            )
        )
        assert [(c.kind, c.label, c.item_id) for c in chips] == [
            (ChipKind.TRICK, "gainer", "t1"),
            (ChipKind.TRANSITION, "vanish", "a1"),
            (ChipKind.TRICK, "cork (complete)", "t2"),
        ]

    def test_plain_arrows_skipped_by_default(self, make_trick, make_arrow):
        chips = sequence_to_chips((make_trick("t1"), make_arrow("a1"), make_trick("t2")))
        assert [c.kind for c in chips] == [ChipKind.TRICK, ChipKind.TRICK]

    def test_plain_arrows_included(self, make_trick, make_arrow):
        chips = sequence_to_chips(
            (make_trick("t1"), make_arrow("a1"), make_trick("t2")),
            include_plain_arrows=True,
        )
        assert chips[1].kind == ChipKind.ARROW

    def test_display_names(self, make_trick, make_arrow):
        chips = sequence_to_chips(
            (make_trick("t1", "btwist"), make_arrow("a1", "vs"), make_trick("t2", "cork")),
            names={"btwist": "Butterfly Twist", "vs": "Vanish Swing"},
        )
        assert [c.label for c in chips] == ["Butterfly Twist", "Vanish Swing", "cork"]


class TestRenderText:
    def test_render(self, make_trick, make_arrow):
        text = render_text(
            (
                make_trick("t1", "gainer"),
                make_arrow("a1"),
                make_trick("t2", "cork", "complete"),
                make_arrow("a2", "vanish"),
                make_trick("t3", "raiz"),
            )
        )
        assert text == "gainer → cork (complete) → [vanish] → raiz"

    def test_render_empty(self):
        assert render_text(()) == ""
