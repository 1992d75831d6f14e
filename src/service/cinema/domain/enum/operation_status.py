from enum import StrEnum


class OperationStatus(StrEnum):
    TICKET_SOLD = 'ticket_sold'
    SEAT_TAKEN = 'seat_taken'
    TICKET_RETURNED = 'ticket_returned'
    TICKET_NOT_FOUND = 'ticket_not_found'
    MOVIE_UPDATED = 'movie_updated'
    MOVIE_NOT_FOUND = 'movie_not_found'
    SHOWTIME_UPDATED = 'showtime_updated'
    SHOWTIME_NOT_FOUND = 'showtime_not_found'
    SEATS_MARKED = 'seats_marked'


SUCCESS_STATUSES = frozenset(
    {
        OperationStatus.TICKET_SOLD,
        OperationStatus.TICKET_RETURNED,
        OperationStatus.MOVIE_UPDATED,
        OperationStatus.SHOWTIME_UPDATED,
        OperationStatus.SEATS_MARKED,
    }
)
