# timebill/application/dtos/base_dto.py

"""
Classe base para dtos personalizados.

Este módulo define a classe base CustomBaseModel que estende
o BaseModel do Pydantic com funcionalidades comuns a todos os
dtos da aplicação: chaves camelCase no JSON e geração de patches
parciais para as atualizações.
"""

from typing import Any, Collection, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Modelo base personalizado para todos os dtos da aplicação.

    Os campos são declarados em snake_case e expostos em camelCase
    (``hourly_rate`` <-> ``hourlyRate``). A entrada aceita os dois formatos.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_patch(self, nullable: Collection[str] = ()) -> Dict[str, Any]:
        """
        Retorna apenas os campos enviados pelo cliente, em snake_case.

        Valores None são descartados, exceto para os campos listados em
        ``nullable``, onde None significa "limpar o valor".

        Args:
            nullable: Campos que aceitam ser limpos com null

        Returns:
            Dict[str, Any]: Campos a alterar
        """
        d = self.model_dump(exclude_unset=True)
        return {k: v for k, v in d.items() if v is not None or k in nullable}
