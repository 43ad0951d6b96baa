import argparse
import collections
import sys

from handgen import boards
from handgen import cards
from handgen import constraints as cs
from handgen import deals
from handgen import generate
from handgen import session
from handgen import summary
from handgen import table
from handgen import util


def parse_range(text):
    """'12-14' -> ('12', '14'); '12-' and '-14' leave a side open; '5' means exactly 5."""
    if '-' not in text:
        return text, text
    lo, hi = text.split('-', 1)
    return lo, hi


def _split_assignment(text, n_keys):
    """'N:S=0-1' -> (['N', 'S'], ('0', '1'))"""
    try:
        keys, rng = text.split('=', 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected KEY=RANGE, got '{text}'")
    keys = keys.upper().split(':')
    if len(keys) != n_keys:
        raise argparse.ArgumentTypeError(f"bad key in '{text}'")
    return keys, parse_range(rng)


def seat_range(text):
    [seat], rng = _split_assignment(text, 1)
    if seat not in cards.SEATS:
        raise argparse.ArgumentTypeError(f"unknown seat '{seat}'")
    return seat, rng


def suit_range(text):
    [suit], rng = _split_assignment(text, 1)
    if suit not in cards.SUITS:
        raise argparse.ArgumentTypeError(f"unknown suit '{suit}'")
    return suit, rng


def seat_suit_range(text):
    [seat, suit], rng = _split_assignment(text, 2)
    if seat not in cards.SEATS or suit not in cards.SUITS:
        raise argparse.ArgumentTypeError(f"unknown seat or suit in '{text}'")
    return seat, suit, rng


def build_parser():
    parser = argparse.ArgumentParser("handgen", description="Generate constrained bridge deals as LIN")
    parser.add_argument("-n", "--boards", default=generate.DEFAULT_NUM_BOARDS,
                        help=f"Number of boards, {generate.MIN_BOARDS}-{generate.MAX_BOARDS}")

    hcp = parser.add_argument_group("HCP")
    hcp.add_argument("--hcp", type=seat_range, action="append", default=[],
                     metavar="SEAT=RANGE", help="e.g. N=12-14; repeatable")
    hcp.add_argument("--dealer-hcp", type=parse_range, metavar="RANGE")
    hcp.add_argument("--partner-hcp", type=parse_range, metavar="RANGE")

    dist = parser.add_argument_group("Distribution")
    dist.add_argument("--dist", type=seat_suit_range, action="append", default=[],
                      metavar="SEAT:SUIT=RANGE", help="e.g. S:H=5- ; repeatable")
    dist.add_argument("--dealer-dist", type=suit_range, action="append", default=[],
                      metavar="SUIT=RANGE")
    dist.add_argument("--partner-dist", type=suit_range, action="append", default=[],
                      metavar="SUIT=RANGE")

    parser.add_argument("--vul", choices=boards.POLICIES, default=boards.POLICY_ROTATING)
    parser.add_argument("--default-vul", choices=table.VULNERABILITIES, default=table.VUL_NONE,
                        help="Vulnerability of every board under --vul fixed")
    parser.add_argument("--seed", type=int, default=deals.SEED)
    parser.add_argument("-o", "--output", help="Write LIN to this path instead of stdout")
    parser.add_argument("--force", action="store_true", help="Overwrite --output")
    parser.add_argument("--summary", action="store_true", help="Print HCP and suit lengths per hand")
    return parser


def hcp_constraints(args, parser) -> cs.ConstraintSet:
    relative = args.dealer_hcp is not None or args.partner_hcp is not None
    if args.hcp and relative:
        parser.error("--hcp cannot be combined with --dealer-hcp/--partner-hcp")
    if relative:
        return cs.relative_hcp(dealer=args.dealer_hcp, partner=args.partner_hcp)
    if args.hcp:
        return cs.per_seat_hcp(dict(args.hcp))
    return cs.no_constraints(cs.MEASURE_HCP)


def dist_constraints(args, parser) -> cs.ConstraintSet:
    relative = args.dealer_dist or args.partner_dist
    if args.dist and relative:
        parser.error("--dist cannot be combined with --dealer-dist/--partner-dist")
    if relative:
        return cs.relative_dist(dealer=dict(args.dealer_dist), partner=dict(args.partner_dist))
    if args.dist:
        ranges = collections.defaultdict(dict)
        for seat, suit, rng in args.dist:
            ranges[seat][suit] = rng
        return cs.per_seat_dist(ranges)
    return cs.no_constraints(cs.MEASURE_DIST)


def main(argv=None):
    util.setup_basic_logging(stream=sys.stderr)  # stdout carries the LIN
    parser = build_parser()
    args = parser.parse_args(argv)

    deal_session = session.DealSession(
        hcp=hcp_constraints(args, parser),
        dist=dist_constraints(args, parser),
        collection=boards.BoardCollection(args.vul, args.default_vul),
        dealer=deals.get_dealer(args.seed),
    )

    if deal_session.new_boards(args.boards) is None:
        print(deal_session.error, file=sys.stderr)
        return 1

    if args.summary:
        print(summary.boards_to_df(deal_session.collection),
              file=sys.stdout if args.output else sys.stderr)

    if args.output:
        try:
            deal_session.save_lin(args.output, force=args.force)
        except OSError as e:
            print(f"{args.output}: {e}", file=sys.stderr)
            return 1
    else:
        print(deal_session.export_lin())
    return 0


if __name__ == '__main__':
    sys.exit(main())
