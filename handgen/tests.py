import pandas as pd
import pytest

from . import boards
from . import budget
from . import cards
from . import constraints as cs
from . import deals
from . import filters
from . import generate
from . import lin
from . import main
from . import session
from . import summary
from . import table


# 10 HCP each, 4-3-3-3 shapes
BALANCED = cards.Deal.from_strings(
    N='SAKQJHT98D765C432',
    E='ST98HAKQJD432C765',
    S='S765H432DAKQJCT98',
    W='S432H765DT98CAKQJ',
)
# every hand a 13-card suit
SKEWED = cards.Deal.from_strings(
    N='SAKQJT98765432HDC',
    E='SHAKQJT98765432DC',
    S='SHDAKQJT98765432C',
    W='SHDCAKQJT98765432',
)
ROTATED = cards.Deal.from_strings(
    N='SHAKQJT98765432DC',
    E='SHDAKQJT98765432C',
    S='SHDCAKQJT98765432',
    W='SAKQJT98765432HDC',
)
# South 37 HCP, West 3, North and East 0
STRONG_SOUTH = cards.Deal.from_strings(
    N='S765H765D8765C876',
    E='S432H432D432C5432',
    S='SAKQJHAKQDAKQCAKQ',
    W='ST98HJT98DJT9CJT9',
)
STRONG_NORTH = cards.Deal.from_strings(
    N='SAKQJHAKQDAKQCAKQ',
    E='S432H432D432C5432',
    S='S765H765D8765C876',
    W='ST98HJT98DJT9CJT9',
)
STRONG_SOUTH_LIN = ('qx|o1|md|1SAKQJHAKQDAKQCAKQ,ST98HJT98DJT9CJT9,S765H765D8765C876'
                    '|rh||ah|Board 1|sv|0|pg||')


class RecordingDealer(deals.ScriptedDealer):
    def __init__(self, fixed_deals):
        super().__init__(fixed_deals)
        self.calls = []

    def deal(self, num, accept=filters.ACCEPT_ALL, max_attempts=5000):
        self.calls.append((num, max_attempts))
        return super().deal(num, accept, max_attempts)


@pytest.fixture
def collection() -> boards.BoardCollection:
    collection = boards.BoardCollection()
    collection.append([BALANCED, SKEWED, ROTATED, STRONG_SOUTH])
    return collection


@pytest.fixture
def fixed_collection() -> boards.BoardCollection:
    collection = boards.BoardCollection(boards.POLICY_FIXED, default_vulnerability=table.VUL_BOTH)
    collection.append([BALANCED, SKEWED, ROTATED, STRONG_SOUTH])
    return collection


class TestCards:
    def test_fixtures_are_legal(self):
        for deal in (BALANCED, SKEWED, ROTATED, STRONG_SOUTH):
            deal.validate()

    def test_validate_rejects_duplicates(self):
        bad = cards.Deal(dict(BALANCED.hands, E=BALANCED['N']))
        with pytest.raises(ValueError, match="duplicate"):
            bad.validate()

    def test_hcp_and_suit_count(self):
        assert cards.hcp(STRONG_SOUTH['S']) == 37
        assert cards.hcp(STRONG_SOUTH['W']) == 3
        assert cards.hcp(STRONG_SOUTH['N']) == 0
        assert cards.count_suit(BALANCED['N'], cards.SUIT_S) == 4
        assert cards.count_suit(SKEWED['N'], cards.SUIT_H) == 0

    def test_partner(self):
        assert [cards.partner(seat) for seat in cards.SEATS] == ['S', 'W', 'N', 'E']

    def test_parse_hand_rejects_junk(self):
        with pytest.raises(ValueError):
            cards.parse_hand('SAKX')

    def test_random_deal_is_sorted_partition(self):
        deal = deals.NumpyDealer(seed=7).deal_one()
        deal.validate()
        for hand in deal.hands.values():
            assert list(hand) == sorted(hand, key=cards.DECK.index)


class TestTable:
    def test_dealer_rotates(self):
        assert [table.dealer_of(n) for n in range(1, 6)] == ['N', 'E', 'S', 'W', 'N']

    def test_vulnerability_cycle(self):
        expected = [
            'none', 'ns', 'ew', 'both',
            'ns', 'ew', 'both', 'none',
            'ew', 'both', 'none', 'ns',
            'both', 'none', 'ns', 'ew',
        ]
        assert [table.vulnerability_of(n) for n in range(1, 17)] == expected
        assert table.vulnerability_of(17) == table.vulnerability_of(1)

    def test_board_zero(self):
        with pytest.raises(ValueError):
            table.dealer_of(0)


class TestConstraints:
    def test_range_parse(self):
        assert cs.Range.parse('12', '14', 37) == cs.Range(12, 14)
        assert cs.Range.parse('', '14', 37) == cs.Range(None, 14)
        assert cs.Range.parse(' 5 ', None, 13) == cs.Range(5, None)

    @pytest.mark.parametrize("raw", ['abc', '-1', '14', '2.5'])
    def test_invalid_bound_is_dropped(self, raw):
        rng = cs.Range.parse(raw, '3', cs.CEILINGS[cs.MEASURE_DIST])
        assert rng == cs.Range(None, 3)

    def test_hcp_ceiling(self):
        assert cs.Range.parse('37', '38', 37) == cs.Range(37, None)

    def test_inverted_range_drops_max(self):
        assert cs.Range.parse('14', '12', 37) == cs.Range(14, None)
        assert cs.Range.parse('5', '5', 13) == cs.Range(5, 5)

        constraints = cs.per_seat_hcp({'N': ('14', '12')})
        deal_session = session.DealSession(hcp=constraints, dealer=deals.ScriptedDealer([STRONG_NORTH]))
        assert constraints.cells == {('N', None): cs.Range(14, None)}
        assert deal_session.add_boards(1) is not None

    def test_range_contains(self):
        rng = cs.Range(12, 14)
        assert [rng.contains(v) for v in (11, 12, 14, 15)] == [False, True, True, False]
        assert cs.Range().contains(40)

    def test_per_seat_hcp_keeps_active_cells_only(self):
        constraints = cs.per_seat_hcp({'N': ('12', '14'), 'S': ('', ''), 'E': ('x', '')})
        assert constraints.mode == cs.MODE_PER_SEAT
        assert constraints.cells == {('N', None): cs.Range(12, 14)}
        assert constraints.is_active

    def test_all_blank_is_inactive(self):
        constraints = cs.per_seat_dist({'N': {'S': ('', '')}})
        assert not constraints.is_active
        assert not cs.no_constraints(cs.MEASURE_HCP).is_active

    def test_relative_dist(self):
        constraints = cs.relative_dist(dealer={'S': ('5', '')}, partner={'H': ('', '0')})
        assert constraints.is_relative
        assert constraints.cells == {
            ('dealer', 'S'): cs.Range(5, None),
            ('partner', 'H'): cs.Range(None, 0),
        }
        assert constraints.has_zero_suit

    def test_cell_keys(self):
        assert len(cs.cell_keys(cs.MEASURE_HCP, cs.MODE_PER_SEAT)) == 4
        assert len(cs.cell_keys(cs.MEASURE_DIST, cs.MODE_PER_SEAT)) == 16
        assert len(cs.cell_keys(cs.MEASURE_HCP, cs.MODE_RELATIVE)) == 2
        assert len(cs.cell_keys(cs.MEASURE_DIST, cs.MODE_RELATIVE)) == 8
        assert cs.cell_keys(cs.MEASURE_DIST, cs.MODE_NONE) == []

    def test_build_rejects_unknown_cells(self):
        with pytest.raises(ValueError, match="Unknown cells"):
            cs.build(cs.MEASURE_HCP, cs.MODE_PER_SEAT, {('X', None): ('1', '2')})

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            cs.ConstraintSet(cs.MEASURE_HCP, 'sometimes')


class TestFilters:
    def test_noop(self):
        assert filters.compile_filter(cs.no_constraints(cs.MEASURE_HCP)) is filters.ACCEPT_ALL
        assert filters.compile_filter(cs.per_seat_hcp({'N': ('', '')})) is filters.ACCEPT_ALL
        noop = filters.compile_filters(cs.no_constraints(cs.MEASURE_HCP),
                                       cs.no_constraints(cs.MEASURE_DIST))
        assert filters.is_noop(noop)

    def test_per_seat_hcp(self):
        accept = filters.compile_filter(cs.per_seat_hcp({'S': ('20', ''), 'W': ('', '5')}))
        assert accept(STRONG_SOUTH)
        assert not accept(BALANCED)

    def test_per_seat_dist(self):
        accept = filters.compile_filter(cs.per_seat_dist({'N': {'H': ('', '0'), 'S': ('13', '')}}))
        assert accept(SKEWED)
        assert not accept(ROTATED)

    def test_relative_binds_to_dealer(self):
        constraints = cs.relative_dist(dealer={'S': ('13', '')})
        assert filters.compile_filter(constraints, filters.BoardContext('N'))(SKEWED)
        assert not filters.compile_filter(constraints, filters.BoardContext('E'))(SKEWED)
        assert filters.compile_filter(constraints, filters.BoardContext('W'))(ROTATED)

    def test_relative_binds_partner(self):
        constraints = cs.relative_hcp(partner=('30', ''))
        assert filters.evaluate(constraints, STRONG_SOUTH, filters.BoardContext('N'))
        assert not filters.evaluate(constraints, STRONG_SOUTH, filters.BoardContext('S'))

    def test_relative_needs_context(self):
        with pytest.raises(ValueError, match="board context"):
            filters.compile_filter(cs.relative_hcp(dealer=('12', '')))

    def test_both_classes_are_anded(self):
        hcp = cs.per_seat_hcp({'N': ('10', '10')})
        dist = cs.per_seat_dist({'N': {'S': ('4', '4')}})
        accept = filters.compile_filters(hcp, dist)
        assert accept(BALANCED)
        assert not accept(SKEWED)  # N 10 HCP, but 13 spades


class TestBudget:
    @pytest.mark.parametrize("has_hcp, has_dist, has_zero, expected", [
        (False, False, False, 5000),
        (True, False, False, 5000),
        (False, True, True, 5000),
        (True, True, False, 15000),
        (True, True, True, 80000),
    ])
    def test_estimate(self, has_hcp, has_dist, has_zero, expected):
        assert budget.estimate(has_hcp, has_dist, has_zero) == expected

    def test_custom_policy(self):
        policy = budget.BudgetPolicy(base=1, combined=2, combined_zero_suit=3)
        assert budget.estimate(True, True, True, policy) == 3

    def test_policy_must_be_positive(self):
        with pytest.raises(ValueError):
            budget.BudgetPolicy(base=0)

    def test_estimate_for(self):
        hcp = cs.per_seat_hcp({'N': ('12', '')})
        dist = cs.per_seat_dist({'S': {'C': ('', '0')}})
        assert budget.estimate_for(hcp, dist) == 80000
        assert budget.estimate_for(hcp, cs.no_constraints(cs.MEASURE_DIST)) == 5000


class TestDealer:
    def test_noop_deals_straight_away(self):
        dealer = deals.ScriptedDealer([BALANCED])
        assert dealer.deal(2, filters.ACCEPT_ALL) == [BALANCED, BALANCED]

    def test_rejection(self):
        dealer = deals.ScriptedDealer([BALANCED, SKEWED])
        accept = filters.compile_filter(cs.per_seat_dist({'N': {'S': ('13', '')}}))
        assert dealer.deal(2, accept, max_attempts=2) == [SKEWED, SKEWED]

    def test_budget_exhausted(self):
        dealer = deals.ScriptedDealer([BALANCED])
        accept = filters.compile_filter(cs.per_seat_hcp({'N': ('20', '')}))
        with pytest.raises(deals.BudgetExhaustedError) as excinfo:
            dealer.deal(3, accept, max_attempts=10)
        assert excinfo.value.max_attempts == 10
        assert excinfo.value.found == 0

    def test_seeded_dealer_repeats(self):
        first = deals.NumpyDealer(seed=42).deal(3)
        second = deals.NumpyDealer(seed=42).deal(3)
        assert first == second


class TestGenerate:
    @pytest.mark.parametrize("raw, expected", [
        ('5', 5), (5, 5), ('50', 32), ('0', 1), ('-3', 1), ('abc', 1), ('', 1), (None, 1), ('7.6', 8),
    ])
    def test_clamp_board_count(self, raw, expected):
        assert generate.clamp_board_count(raw) == expected

    def test_clamp_default(self):
        assert generate.clamp_board_count('x', default=3) == 3

    @pytest.mark.parametrize("raw, expected", [
        ('9' * 5000, 32), ('1e400', 32), ('-1e400', 1), ('nan', 1),
    ])
    def test_clamp_huge_numbers(self, raw, expected):
        assert generate.clamp_board_count(raw) == expected

    def test_seat_absolute_is_one_batch(self):
        dealer = RecordingDealer([BALANCED])
        generated = generate.generate_deals(3, cs.per_seat_hcp({'N': ('10', '')}), dealer=dealer)
        assert generated == [BALANCED] * 3
        assert dealer.calls == [(3, 5000)]

    def test_relative_is_one_call_per_board(self):
        # SKEWED: W holds the clubs, ROTATED: S holds them
        dealer = RecordingDealer([SKEWED, ROTATED])
        dist = cs.relative_dist(dealer={'C': ('', '0')})
        generated = generate.generate_deals(4, dist=dist, dealer=dealer)
        assert dealer.calls == [(1, 5000)] * 4
        assert generated == [SKEWED, ROTATED, SKEWED, ROTATED]
        for number, deal in enumerate(generated, start=1):
            assert cards.count_suit(deal[table.dealer_of(number)], 'C') == 0

    def test_relative_follows_first_number(self):
        dealer = RecordingDealer([BALANCED, SKEWED, ROTATED])
        dist = cs.relative_dist(dealer={'S': ('13', '')})
        [deal] = generate.generate_deals(1, dist=dist, first_number=4, dealer=dealer)
        assert deal is ROTATED  # board 4: West deals

    def test_hcp_property(self):
        hcp = cs.per_seat_hcp({'N': ('15', '17'), 'S': ('', '8')})
        generated = generate.generate_deals(10, hcp, dealer=deals.NumpyDealer(seed=1))
        assert len(generated) == 10
        for deal in generated:
            deal.validate()
            assert 15 <= cards.hcp(deal['N']) <= 17
            assert cards.hcp(deal['S']) <= 8

    def test_relative_hcp_property(self):
        hcp = cs.relative_hcp(dealer=('15', ''), partner=('', '10'))
        generated = generate.generate_deals(8, hcp, dealer=deals.NumpyDealer(seed=2))
        for number, deal in enumerate(generated, start=1):
            dealer = table.dealer_of(number)
            assert cards.hcp(deal[dealer]) >= 15
            assert cards.hcp(deal[cards.partner(dealer)]) <= 10

    @pytest.mark.verbose
    def test_void_property(self):
        hcp = cs.per_seat_hcp({'E': ('10', '')})
        dist = cs.per_seat_dist({'W': {'D': ('', '0')}})
        generated = generate.generate_deals(3, hcp, dist, dealer=deals.NumpyDealer(seed=3))
        for deal in generated:
            deal.validate()
            assert cards.count_suit(deal['W'], 'D') == 0
            assert cards.hcp(deal['E']) >= 10

    def test_generate_boards_appends(self, collection):
        dealer = deals.ScriptedDealer([SKEWED])
        new_boards = generate.generate_boards(2, collection=collection, dealer=dealer)
        assert [b.number for b in new_boards] == [5, 6]
        assert len(collection) == 6

    def test_generate_boards_replaces(self, collection):
        dealer = deals.ScriptedDealer([SKEWED])
        generate.generate_boards(2, collection=collection, replace=True, dealer=dealer)
        assert [b.number for b in collection] == [1, 2]
        assert [b.deal for b in collection] == [SKEWED, SKEWED]

    def test_failure_leaves_collection(self, collection):
        dealer = deals.ScriptedDealer([BALANCED])
        hcp = cs.per_seat_hcp({'N': ('25', '')})
        with pytest.raises(deals.GenerationError):
            generate.generate_boards(3, hcp, collection=collection, replace=True, dealer=dealer,
                                     policy=budget.BudgetPolicy(base=5))
        assert len(collection) == 4
        assert collection[0].deal is BALANCED


class TestBoardCollection:
    def test_append_numbers_and_vul(self, collection):
        assert [b.number for b in collection] == [1, 2, 3, 4]
        assert [b.vulnerability for b in collection] == ['none', 'ns', 'ew', 'both']
        assert [b.dealer for b in collection] == ['N', 'E', 'S', 'W']

    def test_delete_rotating(self, collection):
        removed = collection.delete(1)
        assert removed.deal is SKEWED
        assert [b.deal for b in collection] == [BALANCED, ROTATED, STRONG_SOUTH]
        assert [b.number for b in collection] == [1, 2, 3]
        assert [b.vulnerability for b in collection] == [table.vulnerability_of(n) for n in (1, 2, 3)]

    def test_delete_fixed_keeps_vul(self, fixed_collection):
        fixed_collection.set_vulnerability(2, table.VUL_EW)
        fixed_collection.delete(0)
        assert [b.number for b in fixed_collection] == [1, 2, 3]
        assert [b.vulnerability for b in fixed_collection] == ['both', 'ew', 'both']

    def test_move(self, collection):
        collection.move(0, 2)
        assert [b.deal for b in collection] == [SKEWED, ROTATED, BALANCED, STRONG_SOUTH]
        assert [b.number for b in collection] == [1, 2, 3, 4]
        assert [b.vulnerability for b in collection] == ['none', 'ns', 'ew', 'both']

    def test_move_back(self, collection):
        collection.move(3, 0)
        assert [b.deal for b in collection] == [STRONG_SOUTH, BALANCED, SKEWED, ROTATED]

    def test_move_fixed_keeps_vul(self, fixed_collection):
        fixed_collection.set_vulnerability(0, table.VUL_NS)
        fixed_collection.move(0, 3)
        assert fixed_collection[3].deal is BALANCED
        assert fixed_collection[3].vulnerability == table.VUL_NS
        assert fixed_collection[3].number == 4

    def test_bad_index(self, collection):
        with pytest.raises(IndexError):
            collection.delete(4)
        with pytest.raises(IndexError):
            collection.move(0, -1)

    def test_override_only_when_fixed(self, collection):
        with pytest.raises(ValueError, match="fixed"):
            collection.set_vulnerability(0, table.VUL_BOTH)

    def test_override_rejects_unknown(self, fixed_collection):
        with pytest.raises(ValueError):
            fixed_collection.set_vulnerability(0, 'sometimes')

    def test_switch_policy(self, fixed_collection):
        assert {b.vulnerability for b in fixed_collection} == {'both'}
        fixed_collection.set_policy(boards.POLICY_ROTATING)
        assert [b.vulnerability for b in fixed_collection] == ['none', 'ns', 'ew', 'both']

        fixed_collection.set_policy(boards.POLICY_FIXED)
        assert [b.vulnerability for b in fixed_collection] == ['none', 'ns', 'ew', 'both']
        fixed_collection.append([BALANCED])
        assert fixed_collection[4].vulnerability == 'both'

    def test_default_vulnerability(self):
        collection = boards.BoardCollection(boards.POLICY_FIXED)
        collection.set_default_vulnerability(table.VUL_EW)
        collection.append([BALANCED, SKEWED])
        assert [b.vulnerability for b in collection] == ['ew', 'ew']

    def test_replace_and_clear(self, collection):
        collection.replace([SKEWED])
        assert [(b.number, b.deal) for b in collection] == [(1, SKEWED)]
        collection.clear()
        assert len(collection) == 0


class TestLin:
    def test_encode_hand(self):
        assert lin.encode_hand(STRONG_SOUTH['S']) == 'SAKQJHAKQDAKQCAKQ'
        assert lin.encode_hand(SKEWED['N']) == 'SAKQJT98765432HDC'

    def test_encode_board(self):
        encoded = lin.encode_board(STRONG_SOUTH, 1, cards.SEAT_S, table.VUL_NONE)
        assert encoded == STRONG_SOUTH_LIN
        assert encoded == lin.encode_board(STRONG_SOUTH, 1, cards.SEAT_S, table.VUL_NONE)

    @pytest.mark.parametrize("dealer, vul, md, sv", [
        ('W', 'ns', 'md|2', 'sv|n|'),
        ('N', 'ew', 'md|3', 'sv|e|'),
        ('E', 'both', 'md|4', 'sv|b|'),
    ])
    def test_codes(self, dealer, vul, md, sv):
        encoded = lin.encode_board(BALANCED, 7, dealer, vul)
        assert encoded.startswith(f'qx|o7|{md}')
        assert f'|ah|Board 7|{sv}pg||' in encoded

    def test_east_is_implied(self):
        encoded = lin.encode_board(BALANCED, 1, 'N', 'none')
        hands = encoded.split('|')[3][1:].split(',')
        assert hands == [lin.encode_hand(BALANCED[seat]) for seat in ('S', 'W', 'N')]
        assert lin.encode_hand(BALANCED['E']) not in encoded

    def test_encode_boards_uses_positions(self, collection):
        collection.delete(0)
        lines = lin.encode_boards(collection).split('\n')
        assert len(lines) == 3
        assert lines[0].startswith('qx|o1|md|3')  # board 1: North deals
        assert lines[1].startswith('qx|o2|md|4')
        assert lines[2].startswith('qx|o3|md|1')
        assert lines[2].endswith('|ah|Board 3|sv|e|pg||')

    def test_encode_deals(self):
        encoded = lin.encode_deals([BALANCED, SKEWED], start=3, vulnerability_of=table.vulnerability_of)
        lines = encoded.split('\n')
        assert lines[0].startswith('qx|o3|md|1')
        assert lines[1].endswith('|ah|Board 4|sv|b|pg||')

    def test_write_lin(self, tmp_path):
        path = tmp_path/'hands.lin'
        lin.write_lin(STRONG_SOUTH_LIN, path)
        assert path.read_text() == STRONG_SOUTH_LIN

        with pytest.raises(IOError):
            lin.write_lin(STRONG_SOUTH_LIN, path)
        lin.write_lin('', path, force=True)
        assert path.read_text() == ''


class TestSession:
    def test_add_and_new(self):
        deal_session = session.DealSession(dealer=deals.ScriptedDealer([BALANCED]))
        deal_session.add_boards('2')
        deal_session.add_boards(1)
        assert [b.number for b in deal_session.collection] == [1, 2, 3]
        deal_session.new_boards('abc')
        assert len(deal_session.collection) == 1
        assert deal_session.error is None
        assert not deal_session.generating

    def test_failure_keeps_boards(self):
        deal_session = session.DealSession(dealer=deals.ScriptedDealer([BALANCED]),
                                           budget_policy=budget.BudgetPolicy(base=3))
        deal_session.add_boards(2)

        deal_session.hcp = cs.per_seat_hcp({'N': ('20', '')})
        assert deal_session.add_boards(3) is None
        assert len(deal_session.collection) == 2
        assert deal_session.error == session.BUDGET_EXHAUSTED_MSG
        assert not deal_session.generating

        deal_session.hcp = cs.no_constraints(cs.MEASURE_HCP)
        assert deal_session.add_boards(1)
        assert deal_session.error is None

    def test_refuses_while_generating(self):
        deal_session = session.DealSession(dealer=deals.ScriptedDealer([BALANCED]))
        deal_session.generating = True
        assert deal_session.add_boards(1) is None
        assert len(deal_session.collection) == 0

    def test_describe_error(self):
        assert session.describe_error(deals.BudgetExhaustedError(10)) == session.BUDGET_EXHAUSTED_MSG
        assert session.describe_error(deals.GenerationError("boom")) == "boom"
        assert session.describe_error(deals.GenerationError()) == session.GENERIC_FAILURE_MSG

    def test_save_lin(self, tmp_path):
        deal_session = session.DealSession(dealer=deals.ScriptedDealer([STRONG_SOUTH]))
        with pytest.raises(ValueError):
            deal_session.save_lin(tmp_path/'empty.lin')

        deal_session.add_boards(2)
        path = deal_session.save_lin(tmp_path/'hands.lin')
        assert path.read_text() == deal_session.export_lin()
        assert path.read_text().count('\n') == 1


class TestSummary:
    def test_boards_to_df(self, collection):
        df = summary.boards_to_df(collection)

        assert isinstance(df, pd.DataFrame)
        assert df.shape == (16, 7)
        assert df.index.names == ['board', 'seat']
        assert df.at[(4, 'S'), 'hcp'] == 37
        assert df.at[(2, 'N'), 'S'] == 13
        assert df.loc[df.dealer].index.get_level_values('seat').tolist() == ['N', 'E', 'S', 'W']
        assert df[cards.SUITS].sum(axis=1).eq(13).all()

    def test_shape_of(self, collection):
        df = summary.boards_to_df(collection)
        shapes = summary.shape_of(df)
        assert shapes.at[(1, 'N')] == '4-3-3-3'
        assert shapes.at[(2, 'E')] == '0-13-0-0'

    def test_empty(self):
        df = summary.boards_to_df([])
        assert df.empty


class TestMain:
    def test_parse_range(self):
        assert main.parse_range('12-14') == ('12', '14')
        assert main.parse_range('12-') == ('12', '')
        assert main.parse_range('-14') == ('', '14')
        assert main.parse_range('5') == ('5', '5')

    def test_prints_lin(self, capsys):
        ret = main.main(['-n', '3', '--seed', '5', '--hcp', 'N=10-', '--dist', 'S:H=-6'])

        assert ret == 0
        lines = capsys.readouterr().out.strip().split('\n')
        assert len(lines) == 3
        assert lines[0].startswith('qx|o1|md|3')
        assert lines[2].endswith('|ah|Board 3|sv|e|pg||')

    def test_writes_file(self, tmp_path, capsys):
        path = tmp_path/'out.lin'
        ret = main.main(['-n', '2', '--seed', '5', '--dealer-hcp', '12-', '--vul', 'fixed',
                         '--default-vul', 'both', '-o', str(path)])

        assert ret == 0
        lines = path.read_text().split('\n')
        assert len(lines) == 2
        assert all(line.endswith('sv|b|pg||') for line in lines)

    def test_failure_exit_code(self, capsys):
        ret = main.main(['-n', '1', '--seed', '5', '--hcp', 'N=37'])

        assert ret == 1
        assert 'No deal satisfied' in capsys.readouterr().err

    def test_conflicting_modes(self):
        with pytest.raises(SystemExit):
            main.main(['--hcp', 'N=10-', '--dealer-hcp', '12-'])
