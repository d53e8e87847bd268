# timebill/shared/utils/input_validation.py

import re
from datetime import date
from typing import Annotated, Optional, Tuple

from pydantic import AfterValidator

from timebill.domain.services.time_calculation import CLOCK_TIME_PATTERN


class InputValidator:
    """
    Classe para validação de entradas do usuário,
    complementando as validações do Pydantic.
    """

    # Datas trafegam como texto "YYYY-MM-DD"
    ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
    MAX_CODE_LENGTH = 50

    @classmethod
    def validate_clock_time(cls, value: str) -> Tuple[bool, Optional[str]]:
        """
        Valida um horário no formato HH:MM (00:00 a 23:59).

        Args:
            value: Horário a ser validado

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not value:
            return False, "Horário não pode estar vazio"

        if not CLOCK_TIME_PATTERN.match(value):
            return False, "Horário deve estar no formato HH:MM"

        return True, None

    @classmethod
    def validate_iso_date(cls, value: str) -> Tuple[bool, Optional[str]]:
        """
        Valida uma data no formato YYYY-MM-DD, rejeitando dias inexistentes.

        Args:
            value: Data a ser validada

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not value:
            return False, "Data não pode estar vazia"

        if not cls.ISO_DATE_PATTERN.match(value):
            return False, "Data deve estar no formato YYYY-MM-DD"

        try:
            date.fromisoformat(value)
        except ValueError:
            return False, "Data inexistente"

        return True, None

    @classmethod
    def validate_code(cls, code: str) -> Tuple[bool, Optional[str]]:
        """
        Valida um código de cadastro (cliente, consultor, serviço...).

        Args:
            code: Código a ser validado

        Returns:
            Tupla (válido, mensagem_erro)
        """
        if not code or not code.strip():
            return False, "Código não pode estar vazio"

        if len(code) > cls.MAX_CODE_LENGTH:
            return False, f"Código é muito longo (máximo {cls.MAX_CODE_LENGTH} caracteres)"

        return True, None


def clock_time(value: Optional[str]) -> Optional[str]:
    """Validador Pydantic para campos HH:MM opcionais."""
    if value is None:
        return value
    is_valid, error_msg = InputValidator.validate_clock_time(value)
    if not is_valid:
        raise ValueError(error_msg)
    return value


def iso_date(value: Optional[str]) -> Optional[str]:
    """Validador Pydantic para campos de data opcionais."""
    if value is None:
        return value
    is_valid, error_msg = InputValidator.validate_iso_date(value)
    if not is_valid:
        raise ValueError(error_msg)
    return value


def entity_code(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    is_valid, error_msg = InputValidator.validate_code(value)
    if not is_valid:
        raise ValueError(error_msg)
    return value.strip()


# Tipos anotados para uso direto nos dtos
Code = Annotated[str, AfterValidator(entity_code)]
ClockTime = Annotated[str, AfterValidator(clock_time)]
IsoDate = Annotated[str, AfterValidator(iso_date)]
