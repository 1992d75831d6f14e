"""
Cinema Catalog demo run

Loads the catalog files from the configured data directory and walks through
every cashier operation once, printing each outcome.
"""

import sys

from src.platform.config.di import Container, container
from src.platform.exception.exceptions import CatalogLoadError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.catalog_store import CatalogStore
from src.service.cinema.domain.entity import Movie, Showtime
from src.service.cinema.domain.value_object import ShowtimeKey
from src.service.cinema.driving_adapter.console_presenter import ConsolePresenter


DEMO_SEAT = 'A1'
DEMO_EDITED_MOVIE = Movie(id=1, title='Новое название фильма', duration=120)
DEMO_EDITED_SHOWTIME = Showtime(movie_id=1, time='16:00', seats=['A2', 'A3'])
DEMO_SEATS_TO_MARK = ['A4', 'A5']


def run_demo(store: CatalogStore, presenter: ConsolePresenter) -> None:
    showtimes = store.showtimes
    if not showtimes:
        Logger.base.warning('⚠️ [DEMO] No showtimes in the catalog, seat operations skipped')
    else:
        selected: ShowtimeKey = showtimes[0].key
        presenter.report(store.sell_ticket(showtime_key=selected, seat=DEMO_SEAT))

        sold_tickets = store.sold_tickets
        if sold_tickets:
            presenter.report(store.return_ticket(ticket=sold_tickets[0]))
        else:
            Logger.base.warning('⚠️ [DEMO] No sold tickets, return skipped')

        presenter.display_available_seats(
            time=selected.time, seats=store.available_seats(showtime_key=selected)
        )

    presenter.report(store.edit_movie(movie=DEMO_EDITED_MOVIE))
    presenter.report(store.edit_showtime(showtime=DEMO_EDITED_SHOWTIME))

    if showtimes:
        presenter.report(
            store.mark_seats_taken(showtime_key=showtimes[0].key, seats=DEMO_SEATS_TO_MARK)
        )


def main(app_container: Container = container) -> None:
    presenter = app_container.console_presenter()
    try:
        store = app_container.catalog_store()
        run_demo(store, presenter)
    except CatalogLoadError as e:
        presenter.report_load_error(e)
        sys.exit(1)
    except Exception as e:
        Logger.base.exception(f'💥 [DEMO] Unexpected failure: {e}')
        presenter.report_unexpected_failure()


if __name__ == '__main__':
    main()
