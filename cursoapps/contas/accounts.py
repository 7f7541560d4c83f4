"""Bank accounts with withdrawals, deposits and transfers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class Titular:
    """The holder of an account."""

    nome: str = ""
    cpf: str = ""
    profissao: str = ""


class _Depositavel(Protocol):
    def depositar(self, valor_deposito: float) -> tuple[str, float]: ...


class _Sacavel(Protocol):
    def sacar(self, valor_saque: float) -> str: ...


@dataclass
class ContaCorrente:
    """A checking account, which can also transfer money."""

    titular: Titular = field(default_factory=Titular)
    numero_agencia: int = 0
    numero_conta: int = 0
    _saldo: float = field(default=0.0, init=False)

    def sacar(self, valor_saque: float) -> str:
        """Withdraw a positive amount not above the balance; return a message."""
        if 0 < valor_saque <= self._saldo:
            self._saldo -= valor_saque
            return "saque realizado com sucesso"
        return "saldo insuficiente"

    def depositar(self, valor_deposito: float) -> tuple[str, float]:
        """Deposit a positive amount; return a message and the new balance."""
        if valor_deposito > 0:
            self._saldo += valor_deposito
            return "deposito realizado com sucesso", self._saldo
        return "o valor do deposito deve ser positivo", self._saldo

    def transferir(self, valor_transferencia: float, conta_destino: _Depositavel) -> bool:
        """Move money to another account; return whether it happened."""
        if 0 < valor_transferencia <= self._saldo:
            self._saldo -= valor_transferencia
            conta_destino.depositar(valor_transferencia)
            return True
        return False

    def obter_saldo(self) -> float:
        """Return the current balance."""
        return self._saldo


@dataclass
class ContaPoupanca:
    """A savings account."""

    titular: Titular = field(default_factory=Titular)
    numero_agencia: int = 0
    numero_conta: int = 0
    _saldo: float = field(default=0.0, init=False)
    operacao: int = 0

    def sacar(self, valor_saque: float) -> str:
        """Withdraw a positive amount not above the balance; return a message."""
        if 0 < valor_saque <= self._saldo:
            self._saldo -= valor_saque
            return "saque realizado com sucesso"
        return "saldo insuficiente"

    def depositar(self, valor_deposito: float) -> tuple[str, float]:
        """Deposit a positive amount; return a message and the new balance."""
        if valor_deposito > 0:
            self._saldo += valor_deposito
            return "deposito realizado com sucesso", self._saldo
        return "o valor do deposito deve ser positivo", self._saldo

    def obter_saldo(self) -> float:
        """Return the current balance."""
        return self._saldo


def pagar_boleto(conta: _Sacavel, valor_do_boleto: float) -> str:
    """Pay a bill from an account by withdrawing its value."""
    return conta.sacar(valor_do_boleto)


def main(argv: list[str] | None = None) -> int:
    """Open two accounts, pay a bill from one and print both."""
    argparse.ArgumentParser(description="Contas bancárias").parse_args(argv)

    conta_do_guilherme = ContaCorrente()
    conta_da_ana = ContaPoupanca()

    conta_da_ana.depositar(200)
    pagar_boleto(conta_da_ana, 120)

    print(conta_do_guilherme)
    print(conta_da_ana)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())