# =============================================================================
# Command line front end.
#
# Writes the liturgical calendar of a year to a CSV file named
# `YYYY-yearX-liturgical-calendar.csv` in the current working directory by
# default, where "YYYY" is the year and "X" is the Sunday cycle ("A", "B", or
# "C") of the liturgical year whose Easter falls in it, unless a custom file
# name with directory path is passed with the `-o, --outfile` flag.
# =============================================================================

# To execute in terminal:
# litcalendar --year 2026 --particular united_states -a -e

import argparse
import logging

from .api import generate_calendar
from .config import CalendarConfiguration
from .constants import CalendarScope
from .data import PARTICULAR_CALENDARS, particular_calendar
from .names import sunday_cycle

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Write a Catholic liturgical calendar to a CSV file.',
        prog='litcalendar',
        usage='%(prog)s [arguments]')
    parser.add_argument('--year', metavar='year', type=int, required=True,
                        help='Year of the calendar, formatted `YYYY`')
    parser.add_argument('--particular', metavar='name', type=str, default=None,
                        choices=sorted(PARTICULAR_CALENDARS),
                        help='Particular calendar applied over the General Roman Calendar: '
                             + ', '.join(sorted(PARTICULAR_CALENDARS)))
    parser.add_argument('--scope', type=str, default=CalendarScope.GREGORIAN.value,
                        choices=[scope.value for scope in CalendarScope],
                        help='Calendar year from January to December (gregorian) or from '
                             'the First Sunday of Advent of the previous year (liturgical)')
    parser.add_argument('-a', '--ascension_sunday', action='store_true',
                        help='Declare that Ascension is transferred to the Seventh Sunday of Easter rather than being celebrated on Ascension Thursday.')
    parser.add_argument('-e', '--epiphany_sunday', action='store_true',
                        help='Celebrate the Epiphany on the Sunday between January 2 and January 8 rather than on January 6.')
    parser.add_argument('--corpus_christi_thursday', action='store_true',
                        help='Celebrate Corpus Christi on the Thursday after Trinity Sunday.')
    parser.add_argument('-o', '--outfile', type=str, default=None,
                        help='Name and directory of csv file to write')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log progress; repeat for debugging output')
    return parser.parse_args(argv)


def configuration_from_args(args):
    """Translate parsed arguments into a `CalendarConfiguration`."""
    particular = particular_calendar(args.particular) if args.particular else None
    return CalendarConfiguration(
        particular=particular,
        scope=CalendarScope(args.scope),
        ascension_on_sunday=args.ascension_sunday,
        corpus_christi_on_sunday=not args.corpus_christi_thursday,
        epiphany_on_sunday=args.epiphany_sunday,
    )


def default_outfile(year):
    return f'{year}-year{sunday_cycle(year)}-liturgical-calendar.csv'


def main(argv=None):

    # Parse args
    args = parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    configuration = configuration_from_args(args)
    calendar = generate_calendar(configuration, args.year)
    if calendar.failures:
        for key, message in calendar.failures.items():
            logger.warning('%s was not placed: %s', key, message)

    df = calendar.to_dataframe()
    df.set_index('date', inplace=True)

    # Write to file
    outfile = args.outfile or default_outfile(args.year)
    df.to_csv(outfile)
    logger.info('Wrote %d observances to %s', len(df), outfile)
    return outfile


if __name__ == "__main__":
    main()
