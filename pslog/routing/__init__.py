"""pslog routing — fans each log call out to the configured channels.

Four channels are supported: the OS event log, an append-only file, a
serial port and the console.  The LogDispatcher gates each one against
its own minimum severity and hands the formatted lines to the matching
sink.  Sinks are pluggable: any object implementing the protocols in
``pslog.routing.sinks`` can stand in for the platform implementations.
"""
