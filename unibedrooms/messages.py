"""User-facing messages and the errors that carry them."""

EXIT = "Obrigado. Ate a proxima."

STUDENT_REGISTERED = "Registo de estudante executado."
MANAGER_REGISTERED = "Registo de gerente executado."
ROOM_REGISTERED = "Registo de quarto executado."
ROOM_UPDATED = "Estado de quarto atualizado."
ROOM_REMOVED = "Remocao de quarto executada."
APPLICATION_REGISTERED = "Registo de candidatura executado."
APPLICATION_ACCEPTED = "Aceitacao de candidatura executada."

FREE = "livre"
OCCUPIED = "ocupado"


class RoomsError(Exception):
    """Base error; its text is the message shown to the user."""

    message = "Erro."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)

    def __str__(self) -> str:
        return self.args[0]


class InvalidCommand(RoomsError):
    message = "Comando invalido."


class UserExists(RoomsError):
    message = "Utilizador ja existente."


class StudentNotFound(RoomsError):
    message = "Inexistencia do estudante referido."


class ManagerNotFound(RoomsError):
    message = "Inexistencia do gerente referido."


class RoomExists(RoomsError):
    message = "Quarto existente."


class RoomNotFound(RoomsError):
    message = "Inexistencia do quarto referido."


class NotAuthorized(RoomsError):
    message = "Operacao nao autorizada."


class ActiveApplications(RoomsError):
    message = "Candidaturas activas."


class RoomOccupied(RoomsError):
    message = "Quarto ocupado."


class ApplicationExists(RoomsError):
    message = "Candidatura existente."


class ApplicationNotFound(RoomsError):
    message = "Inexistencia da candidatura referida."


class NoApplications(RoomsError):
    message = "Inexistencia de candidaturas."


class NoRooms(RoomsError):
    message = "Inexistencia de quartos."


class NoRoomsInLocality(RoomsError):
    message = "Inexistencia de quartos na localidade referida."


class NoManagers(RoomsError):
    message = "Inexistencia de gerentes."