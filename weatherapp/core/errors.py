from __future__ import annotations

from weatherapp.models.weather import WeatherErrorKind

CITY_NOT_FOUND_MESSAGE = "Cidade não encontrada. Verifique o nome digitado."
INVALID_API_KEY_MESSAGE = "Erro 401: Chave de API inválida ou não ativada."
NETWORK_ERROR_MESSAGE = "Erro de rede ao buscar dados do clima."
INVALID_INPUT_MESSAGE = "Informe o nome de uma cidade."
UNEXPECTED_ERROR_PREFIX = "Ocorreu um erro: "


def fetch_failed_message(status_code: int | None) -> str:
    if status_code is None:
        return NETWORK_ERROR_MESSAGE
    return f"Falha ao buscar dados do clima: Código {status_code}"


class InvalidCityError(ValueError):
    kind = WeatherErrorKind.INVALID_INPUT

    def __init__(self, message: str = INVALID_INPUT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message
