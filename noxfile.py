# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

import nox


@nox.session(venv_backend="uv")
@nox.parametrize("pandas", ["2.1", "2.2"])
def test(session, pandas):
    session.install(f"pandas ~={pandas}.0", "-e", ".[test]")
    opts = session.posargs
    if not opts:
        opts = ["tests"]
    session.run("pytest", *opts)
