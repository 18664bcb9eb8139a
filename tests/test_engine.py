"""Unit tests for the game engine."""

from collections import Counter

import pytest
from unocard.engine import (
    Card,
    Color,
    Content,
    create_deck,
    UnoEngine,
    DIR_LEFT,
    DIR_RIGHT,
    MAX_HOLD_CARDS,
)

R, B, G, Y, N = Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW, Color.NONE


def card(color: Color, content: Content) -> Card:
    return Card(color, content)


def test_create_deck_size() -> None:
    deck = create_deck(seed=42)
    assert len(deck) == 108


def test_create_deck_composition() -> None:
    counts = Counter(create_deck(seed=1))
    assert counts[card(R, Content.NUM0)] == 1
    assert counts[card(B, Content.NUM7)] == 2
    assert counts[card(G, Content.DRAW2)] == 2
    assert counts[card(Y, Content.REV)] == 2
    assert counts[card(N, Content.WILD)] == 4
    assert counts[card(N, Content.WILD_DRAW4)] == 4
    assert sum(1 for c in create_deck(seed=1) if c.color is R) == 25


def test_create_deck_reproducible() -> None:
    d1 = create_deck(seed=123)
    d2 = create_deck(seed=123)
    assert [str(c) for c in d1] == [str(c) for c in d2]


def test_card_validation() -> None:
    with pytest.raises(ValueError):
        Card(N, Content.NUM5)
    with pytest.raises(ValueError):
        Card(R, Content.WILD)
    with pytest.raises(ValueError):
        Card(R, Content.NUM5, wild_color=B)


def test_card_identity_ignores_wild_color() -> None:
    played = card(N, Content.WILD).with_wild_color(B)
    assert played == card(N, Content.WILD)
    assert played.real_color is B
    assert played.at_rest().wild_color is N
    assert card(R, Content.NUM3).real_color is R


def test_card_names_and_scores() -> None:
    assert card(B, Content.NUM3).name == "Blue 3"
    assert card(N, Content.WILD_DRAW4).name == "Wild +4"
    assert card(R, Content.DRAW2).name == "Red +2"
    assert card(R, Content.NUM7).score == 7
    assert card(G, Content.SKIP).score == 20
    assert card(N, Content.WILD).score == 50


def test_start_deals_seven(total_cards) -> None:
    engine = UnoEngine(players=4, seed=1)
    engine.start()
    for seat in range(4):
        assert engine.get_player(seat).hand_size == 7
    assert len(engine.recent) == 1
    assert not engine.top.is_wild
    assert engine.deck_count == 108 - 7 * 4 - 1
    assert engine.pending_draw_count == 0
    assert engine.direction == DIR_LEFT
    assert engine.now in engine.active_seats()
    assert total_cards(engine) == 108


def test_start_three_players_leaves_north_idle() -> None:
    engine = UnoEngine(players=3, seed=2)
    engine.start()
    assert engine.active_seats() == [0, 1, 3]
    assert engine.get_player(2) is None
    assert engine.deck_count == 108 - 7 * 3 - 1
    assert engine.now != 2
    assert engine.is_hand_full(2)
    assert engine.draw(2) == -1
    assert not engine.is_hand_full(0)


def test_start_sorts_hands() -> None:
    engine = UnoEngine(seed=3)
    engine.start()
    for seat in engine.active_seats():
        hand = engine.get_player(seat).hand
        assert hand == sorted(hand, key=lambda c: c.sort_key)


def test_seeded_start_reproduces_deal() -> None:
    e1 = UnoEngine(seed=99)
    e2 = UnoEngine(seed=99)
    e1.start()
    e2.start()
    for seat in range(4):
        assert [str(c) for c in e1.get_player(seat).hand] == [str(c) for c in e2.get_player(seat).hand]
    assert e1.top == e2.top
    assert e1.now == e2.now


def test_players_change_waits_for_next_round() -> None:
    engine = UnoEngine(players=4, seed=4)
    engine.players = 3
    assert engine.players == 3
    engine.start()
    engine.players = 4
    assert engine.players == 3
    engine.start()
    assert engine.players == 4
    with pytest.raises(ValueError):
        engine.players = 5


def test_legality(engine, rig) -> None:
    rig(engine, {0: [card(R, Content.NUM2), card(B, Content.NUM5), card(B, Content.NUM3), card(N, Content.WILD)]},
        [card(R, Content.NUM5)], now=0)
    hand = engine.get_player(0).hand
    assert [str(c) for c in hand] == ["Wild", "Red 2", "Blue 3", "Blue 5"]
    assert [engine.is_legal_to_play(c) for c in hand] == [True, True, False, True]
    assert engine.legal_cards_count_for_now_player() == 3


def test_legality_on_played_wild(engine, rig) -> None:
    rig(engine, {0: [card(B, Content.NUM1), card(G, Content.NUM1)]},
        [card(R, Content.NUM5), card(N, Content.WILD).with_wild_color(G)], now=0)
    hand = engine.get_player(0).hand
    assert [engine.is_legal_to_play(c) for c in hand] == [False, True]


def test_play_rejects_illegal_and_out_of_range(engine, rig, total_cards) -> None:
    rig(engine, {0: [card(B, Content.NUM3), card(R, Content.NUM2)]}, [card(R, Content.NUM5)], now=0)
    blue = engine.get_player(0).hand.index(card(B, Content.NUM3))
    assert engine.play(0, blue) is None
    assert engine.play(0, 5) is None
    assert engine.play(0, -1) is None
    assert engine.play(7, 0) is None
    assert engine.get_player(0).hand_size == 2
    assert len(engine.recent) == 1
    assert total_cards(engine) == 108


def test_play_wild_records_color_and_strong_color(engine, rig) -> None:
    rig(engine, {0: [card(N, Content.WILD), card(B, Content.NUM3), card(B, Content.NUM4)]},
        [card(R, Content.NUM5)], now=0)
    played = engine.play(0, 0, B)
    assert played.content is Content.WILD
    assert engine.top.real_color is B
    assert engine.last_color is B
    player = engine.get_player(0)
    assert player.strong_color is B
    assert player.recent is played

    # A non-wild card of the strong color clears it
    engine.play(0, 0)
    assert player.strong_color is N


def test_play_wild_without_color_defaults_red(engine, rig) -> None:
    rig(engine, {0: [card(N, Content.WILD), card(B, Content.NUM3)]}, [card(G, Content.NUM5)], now=0)
    engine.play(0, 0)
    assert engine.last_color is R


def test_play_clears_weak_color(engine, rig) -> None:
    rig(engine, {0: [card(R, Content.NUM2), card(B, Content.NUM3)]}, [card(R, Content.NUM5)], now=0)
    player = engine.get_player(0)
    engine.draw(0)
    assert player.weak_color is R
    engine.play(0, player.hand.index(card(R, Content.NUM2)))
    assert player.weak_color is N


def test_play_leaving_one_card_is_visible(engine, rig) -> None:
    rig(engine, {0: [card(R, Content.NUM2), card(B, Content.NUM3)]}, [card(R, Content.NUM5)], now=0)
    assert engine.play(0, engine.get_player(0).hand.index(card(R, Content.NUM2))) is not None
    assert engine.get_player(0).hand_size == 1


def test_play_soundness_over_every_index() -> None:
    for seed in range(10):
        dealt = UnoEngine(seed=seed)
        dealt.start()
        now = dealt.now
        hand = list(dealt.get_player(now).hand)
        for i, c in enumerate(hand):
            engine = UnoEngine(seed=seed)
            engine.start()
            legal = engine.is_legal_to_play(c)
            assert (engine.play(now, i, B) is not None) == legal


def test_draw(engine, rig, total_cards) -> None:
    rig(engine, {0: [card(R, Content.NUM2)]}, [card(G, Content.NUM5)], now=0)
    before = engine.deck_count
    index = engine.draw(0)
    player = engine.get_player(0)
    assert index >= 0
    assert player.hand_size == 2
    assert engine.deck_count == before - 1
    assert player.weak_color is G
    assert player.recent is None
    assert player.hand == sorted(player.hand, key=lambda c: c.sort_key)
    assert total_cards(engine) == 108


def test_draw_blocked_by_hand_cap(engine, rig) -> None:
    full = [card(R, Content.NUM1)] * 2 + [card(R, Content.NUM2)] * 2 + [card(R, Content.NUM3)] * 2 \
        + [card(B, Content.NUM1)] * 2 + [card(B, Content.NUM2)] * 2 + [card(B, Content.NUM3)] * 2 \
        + [card(G, Content.NUM1)] * 2 + [card(G, Content.NUM2)]
    assert len(full) == MAX_HOLD_CARDS
    rig(engine, {0: full}, [card(Y, Content.NUM5)], now=0)
    before = engine.deck_count
    assert engine.is_hand_full(0)
    assert engine.draw(0) == -1
    assert engine.draw(0, force=True) == -1
    assert engine.get_player(0).hand_size == MAX_HOLD_CARDS
    assert engine.deck_count == before


def test_draw_reshuffles_discard_except_top(engine, rig, total_cards) -> None:
    rig(engine, {0: [card(R, Content.NUM2)]}, [card(N, Content.WILD).with_wild_color(B), card(B, Content.NUM5)], now=0)
    deck = engine._deck
    deck.discard = deck.draw_pile + deck.discard
    deck.draw_pile = []
    assert engine.deck_count == 0

    assert engine.draw(0) >= 0
    assert engine.recent == (card(B, Content.NUM5),)
    assert all(c.wild_color is N for c in deck.draw_pile)
    assert total_cards(engine) == 108


def test_used_count_excludes_recent_window(engine, rig) -> None:
    assert engine.used_count == 0
    discard = [card(R, Content.NUM1), card(R, Content.NUM2), card(R, Content.NUM3), card(R, Content.NUM4),
               card(R, Content.NUM6), card(R, Content.NUM7), card(R, Content.NUM8)]
    rig(engine, {0: [card(R, Content.NUM9), card(B, Content.NUM1)]}, discard, now=0)
    assert engine.used_count == 2
    engine.play(0, engine.get_player(0).hand.index(card(R, Content.NUM9)))
    assert engine.used_count == 3
    assert len(engine.recent) == 8


def test_switch_now_four_players(engine) -> None:
    engine._now = 0
    assert [engine.switch_now() for _ in range(4)] == [1, 2, 3, 0]
    engine.switch_direction()
    assert engine.direction == DIR_RIGHT
    assert [engine.switch_now() for _ in range(4)] == [3, 2, 1, 0]


def test_switch_now_three_players_skips_north() -> None:
    engine = UnoEngine(players=3, seed=5)
    engine.start()
    engine._now = 0
    assert [engine.switch_now() for _ in range(3)] == [1, 3, 0]
    assert engine.switch_direction() == DIR_RIGHT
    assert [engine.switch_now() for _ in range(3)] == [3, 1, 0]
    assert engine.next_seat == 3
    assert engine.prev_seat == 1


def test_switch_direction_toggles(engine) -> None:
    assert engine.switch_direction() == DIR_RIGHT
    assert engine.switch_direction() == DIR_LEFT


def test_cycle_passes_hands_forward(engine, total_cards) -> None:
    before = {s: list(engine.get_player(s).hand) for s in range(4)}
    engine.cycle()
    for s in range(4):
        assert engine.get_player((s + 1) % 4).hand == before[s]
    assert total_cards(engine) == 108

    engine.switch_direction()
    engine.cycle()
    for s in range(4):
        assert engine.get_player(s).hand == before[s]


def test_cycle_three_players() -> None:
    engine = UnoEngine(players=3, seed=6)
    engine.start()
    before = {s: list(engine.get_player(s).hand) for s in engine.active_seats()}
    engine.cycle()
    assert engine.get_player(1).hand == before[0]
    assert engine.get_player(3).hand == before[1]
    assert engine.get_player(0).hand == before[3]


def test_swap(engine, total_cards) -> None:
    a, b = list(engine.get_player(0).hand), list(engine.get_player(2).hand)
    engine.get_player(2).strong_color = G
    engine.swap(0, 2)
    assert engine.get_player(0).hand == b
    assert engine.get_player(2).hand == a
    assert engine.get_player(0).strong_color is G
    assert total_cards(engine) == 108


def test_draw2_adds_pending_without_stacking(engine, rig) -> None:
    rig(engine, {0: [card(R, Content.DRAW2), card(B, Content.NUM1)], 1: [card(B, Content.DRAW2)]},
        [card(R, Content.NUM5)], now=0)
    engine.play(0, engine.get_player(0).hand.index(card(R, Content.DRAW2)))
    assert engine.pending_draw_count == 2
    engine.switch_now()
    assert not engine.is_legal_to_play(card(B, Content.DRAW2))
    assert engine.legal_cards_count_for_now_player() == 0


def test_draw2_stack_scenario(engine, rig, total_cards) -> None:
    engine.draw2_stack_rule = True
    rig(engine, {
        0: [card(R, Content.DRAW2), card(R, Content.NUM3)],
        1: [card(B, Content.DRAW2), card(G, Content.NUM4)],
        2: [card(Y, Content.NUM1), card(G, Content.NUM9)],
        3: [card(Y, Content.NUM2)],
    }, [card(R, Content.NUM5)], now=0)

    engine.play(0, engine.get_player(0).hand.index(card(R, Content.DRAW2)))
    assert engine.pending_draw_count == 2
    assert not engine.is_legal_to_play(card(R, Content.NUM3))
    assert not engine.is_legal_to_play(card(N, Content.WILD))
    assert engine.switch_now() == 1

    assert engine.play(1, engine.get_player(1).hand.index(card(B, Content.DRAW2))) is not None
    assert engine.pending_draw_count == 4
    assert engine.switch_now() == 2

    assert engine.legal_cards_count_for_now_player() == 0
    drawn = engine.draw_pending(2)
    assert len(drawn) == 4
    assert engine.get_player(2).hand_size == 6
    assert engine.pending_draw_count == 0
    assert total_cards(engine) == 108


def test_forced_draw_pays_one_pending_card(engine, rig) -> None:
    rig(engine, {0: [card(R, Content.DRAW2), card(B, Content.NUM1)], 1: [card(G, Content.NUM1)]},
        [card(R, Content.NUM5)], now=0)
    engine.play(0, engine.get_player(0).hand.index(card(R, Content.DRAW2)))
    engine.draw(1)
    assert engine.pending_draw_count == 2
    engine.draw(1, force=True)
    assert engine.pending_draw_count == 1


def test_penalty_draws_keep_weak_color(engine, rig) -> None:
    rig(engine, {0: [card(N, Content.WILD_DRAW4), card(B, Content.NUM3)],
                 1: [card(G, Content.NUM1), card(G, Content.NUM2)]},
        [card(R, Content.NUM5)], now=0)
    engine.play(0, 0, G)
    engine.switch_now()
    for _ in range(4):
        assert engine.draw(1, force=True) >= 0
    assert engine.get_player(1).hand_size == 6
    assert engine.get_player(1).weak_color is N

    engine._seats[1].weak_color = Y
    engine.draw_pending(1)
    engine.draw(1, force=True)
    assert engine.get_player(1).weak_color is Y


def test_draw4_challenge_illegal_use(engine, rig) -> None:
    rig(engine, {0: [card(N, Content.WILD_DRAW4), card(R, Content.NUM2), card(B, Content.NUM3)],
                 1: [card(G, Content.NUM1)]},
        [card(R, Content.NUM5)], now=0)
    engine.play(0, 0, B)
    assert engine.recent[-2] == card(R, Content.NUM5)
    assert not engine.is_draw4_legal(0)
    for _ in range(4):
        engine.draw(0, force=True)
    assert engine.get_player(0).hand_size == 6


def test_draw4_challenge_legal_use(engine, rig) -> None:
    rig(engine, {0: [card(N, Content.WILD_DRAW4), card(B, Content.NUM3), card(G, Content.NUM7)]},
        [card(R, Content.NUM5)], now=0)
    engine.play(0, 0, B)
    assert engine.is_draw4_legal(0)

