#!/usr/bin/env python3
"""Transfer Operation — fail-fast steps with per-call overrides.

================================================================================
WHAT DOES AN OPERATION DO?
================================================================================

An operation composes collaborators ("steps") that each return a Result.
The body is written as if every step succeeds::

    account = self.step(self.lookup.call(account_id))
    self.step(self.debit.call(account, amount))

The first Failure ends the call and becomes its result. A step declared
with ``error="DEBIT_DECLINED"`` reports that payload instead of the
collaborator's own error.


================================================================================
WHAT IS SHOWN HERE
================================================================================

    [1] Successful transfer
    [2] Failing debit short-circuits the notification
    [3] Params validation rejects the call before the body runs
    [4] Swapping a collaborator for one call only
    [5] Hooks reshaping the final result
"""

from railop import Failure, Operation, Params, Step, Success, on_failure
from railop.core.logging import configure_logging


ACCOUNTS = {1: {"id": 1, "balance": 100}, 2: {"id": 2, "balance": 5}}


class LookupAccount:
    @staticmethod
    def call(account_id):
        account = ACCOUNTS.get(account_id)
        return Success(account) if account else Failure("unknown account")


class DebitAccount:
    @staticmethod
    def call(account, amount):
        if account["balance"] < amount:
            return Failure("insufficient funds")
        return Success({**account, "balance": account["balance"] - amount})


class Notify:
    sent = []

    @classmethod
    def call(cls, account):
        cls.sent.append(account["id"])
        return Success(True)


def validate_transfer(params):
    amount = params.get("amount")
    if not isinstance(amount, int) or amount <= 0:
        return Failure("amount must be a positive integer")
    return Success(params)


class Transfer(Operation):
    lookup = Step(LookupAccount)
    debit = Step(DebitAccount, error="DEBIT_DECLINED")
    notify = Step(Notify)
    validate = Params(validate_transfer, error="INVALID_TRANSFER")

    @on_failure
    def as_payload(result):
        return result.map_err(lambda error: {"error": error})

    def execute(self, *, params):
        account = self.step(self.lookup.call(params["account_id"]))
        updated = self.step(self.debit.call(account, params["amount"]))
        self.step(self.notify.call(updated))
        return updated


class RichLookup:
    @staticmethod
    def call(account_id):
        return Success({"id": account_id, "balance": 1_000_000})


def main():
    configure_logging(level="WARNING", json_format=False)

    print("=" * 60)
    print("Transfer Operation Examples")
    print("=" * 60)

    print("\n[1] Successful transfer")
    print(f"  {Transfer.call(params={'account_id': 1, 'amount': 30})}")

    print("\n[2] Failing debit")
    Notify.sent.clear()
    print(f"  {Transfer.call(params={'account_id': 2, 'amount': 30})}")
    print(f"  notifications sent: {Notify.sent}")

    print("\n[3] Params validation")
    print(f"  {Transfer.call(params={'account_id': 1, 'amount': -3})}")

    print("\n[4] Per-call override")
    overridden = Transfer.call(
        params={"account_id": 2, "amount": 30},
        configure=lambda o: o.step(lookup=RichLookup),
    )
    print(f"  with RichLookup: {overridden}")
    print(f"  without:         {Transfer.call(params={'account_id': 2, 'amount': 30})}")

    print("\n[5] Definition")
    for step in Transfer.describe()["steps"]:
        print(f"  {step['name']:<8} {step['implementation']:<40} error={step['error']}")

    print("\n" + "=" * 60)
    print("[OK] Transfer Operation Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
