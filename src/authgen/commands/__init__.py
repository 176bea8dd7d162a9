"""Built-in CLI sub-commands for authgen.

* :mod:`~authgen.commands.generate` -- ``basic``, ``bearer``, ``digest``
  and ``jwt`` commands that generate a credential from flags.
* :mod:`~authgen.commands.profile` -- manage and generate from stored
  credential profiles.
* :mod:`~authgen.commands.config` -- view and modify global settings.

Group modules export a :class:`typer.Typer` sub-application; the generate
commands are plain callbacks registered directly on the root app.
"""
