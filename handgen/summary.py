import typing as T

import pandas as pd

from handgen import boards as bd
from handgen import cards


def boards_to_df(boards: T.Iterable[bd.Board]) -> pd.DataFrame:
    """Summarize boards as a DataFrame indexed by (board, seat).

    Columns: dealer, vul, hcp, and one suit-length column per suit (S, H, D, C).
    """
    records = []
    for board in boards:
        for seat in cards.SEATS:
            hand = board.deal[seat]
            record = {
                'board': board.number,
                'seat': seat,
                'dealer': board.dealer == seat,
                'vul': board.vulnerability,
                'hcp': cards.hcp(hand),
            }
            record.update({suit: cards.count_suit(hand, suit) for suit in cards.SUITS})
            records.append(record)

    columns = ['board', 'seat', 'dealer', 'vul', 'hcp'] + cards.SUITS
    return pd.DataFrame.from_records(records, columns=columns).set_index(['board', 'seat'])


def shape_of(df: pd.DataFrame) -> pd.Series:
    """Hand shapes like '5-3-3-2' (S-H-D-C lengths), aligned with `df`."""
    return df[cards.SUITS].astype(str).agg('-'.join, axis=1).rename('shape')
