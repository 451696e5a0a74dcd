from __future__ import annotations

from league import Direction, Motivation, MotivationCategory as C
from trades import compute_ai_trading_block, is_player_available
from trades.availability import retention_scorer


def _block_ids(entries):
    return {e.player_id: e.reason for e in entries}


def _base_roster(make_roster):
    # Three protected stars, then solid rotation players on fair three-year deals.
    return make_roster("AAA", [88, 86, 84] + [70] * 7, contract_years_remaining=3)


def test_non_stars_are_always_available(make_player):
    assert is_player_available(make_player("p", overall_rating=81, contract_years_remaining=4))


def test_protected_star_opens_up_on_any_availability_signal(make_player):
    star = make_player("s", overall_rating=85, contract_years_remaining=3, morale=70.0)
    assert not is_player_available(star, retention=60)
    assert not is_player_available(star)
    assert is_player_available(star, trading_block={"s"})
    assert is_player_available(star, retention=39)
    assert not is_player_available(star, retention=40)

    unhappy = make_player("u", overall_rating=85, contract_years_remaining=3, morale=49.0)
    assert is_player_available(unhappy)

    expiring = make_player("e", overall_rating=85, contract_years_remaining=1)
    assert is_player_available(expiring)

    unknown_term = make_player("n", overall_rating=85, contract_years_remaining=None)
    assert not is_player_available(unknown_term)


def test_rebuilder_keeps_a_likely_resigner_off_the_block(make_roster, make_player, make_team):
    roster = _base_roster(make_roster)
    keeper = make_player(
        "keeper",
        overall_rating=78,
        contract_years_remaining=1,
        years_with_team=3,
        motivations={C.LOYALTY: Motivation(weight=1.0)},
    )
    roster.append(keeper)
    team = make_team("AAA", roster)

    assert retention_scorer(roster, None)(keeper) > 50
    assert "keeper" not in _block_ids(compute_ai_trading_block(team, roster, Direction.REBUILDING))


def test_rebuilder_lists_an_expiring_player_unlikely_to_stay(make_roster, make_player, make_team):
    roster = _base_roster(make_roster)
    roster.append(make_player("walker", overall_rating=78, contract_years_remaining=1))
    team = make_team("AAA", roster)

    block = _block_ids(compute_ai_trading_block(team, roster, Direction.REBUILDING))
    assert block["walker"] == "expiring_contract"


def test_contender_lists_flight_risks(make_roster, make_player, make_team):
    roster = _base_roster(make_roster)
    roster.append(
        make_player(
            "risk",
            overall_rating=75,
            contract_salary=1_000_000.0,
            contract_years_remaining=1,
            motivations={C.MONEY: Motivation(weight=1.0)},
        )
    )
    team = make_team("AAA", roster)

    block = _block_ids(compute_ai_trading_block(team, roster, Direction.WIN_NOW))
    assert block == {"risk": "flight_risk"}


def test_rebuilder_moves_veterans_with_term_left(make_roster, make_player, make_team):
    roster = _base_roster(make_roster)
    roster.append(make_player("vet", overall_rating=76, age=31, contract_years_remaining=3))
    team = make_team("AAA", roster)

    block = _block_ids(compute_ai_trading_block(team, roster, Direction.REBUILDING))
    assert block == {"vet": "veteran_for_rebuild"}


def test_overpaid_depth_is_listed_but_core_is_not(make_roster, make_player, make_team):
    roster = _base_roster(make_roster)
    roster.append(make_player("pricey", overall_rating=66, contract_salary=9_000_000.0, contract_years_remaining=3))
    team = make_team("AAA", roster)

    block = _block_ids(compute_ai_trading_block(team, roster, Direction.WIN_NOW))
    assert block == {"pricey": "overpaid"}


def test_protected_stars_never_appear_and_block_is_capped(make_roster, make_team):
    roster = make_roster("AAA", [88, 86, 84] + [70] * 9, contract_years_remaining=1)
    team = make_team("AAA", roster)

    block = compute_ai_trading_block(team, roster, Direction.REBUILDING)
    ids = [e.player_id for e in block]
    assert len(ids) == 5
    assert not {"aaa0", "aaa1", "aaa2"} & set(ids)


def test_likely_resigner_stays_off_the_block_even_when_overpaid(make_roster, make_player, make_team):
    roster = make_roster("AAA", [88, 86, 84, 82, 80] + [70] * 5, contract_years_remaining=3)
    keeper = make_player(
        "keeper",
        overall_rating=78,
        contract_salary=40_000_000.0,
        contract_years_remaining=1,
        years_with_team=3,
        motivations={C.LOYALTY: Motivation(weight=1.0)},
    )
    roster.append(keeper)
    team = make_team("AAA", roster)

    assert retention_scorer(roster, None)(keeper) > 50
    assert "keeper" not in _block_ids(compute_ai_trading_block(team, roster, Direction.REBUILDING))
