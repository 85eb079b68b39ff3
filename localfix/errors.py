"""Errors raised while scanning, reading, reporting and rewriting files."""


class LocalfixError(Exception):
    """Base error. Carries a kind tag and the file or path it concerns."""

    kind = 'error'
    template = '{context}'

    def __init__(self, context: str):
        self.context = str(context)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return self.template.format(context=self.context)


class DecodeError(LocalfixError):
    kind = 'decode_error'
    template = 'Failed to convert data from file {context} to a string.'


class ReadError(LocalfixError):
    kind = 'read_error'
    template = 'Failed to read the file {context}.'


class NoLocalizationFilesFound(LocalfixError):
    kind = 'no_localization_files'
    template = 'No localization files were found in the directory {context}.'


class InvalidReportDestination(LocalfixError):
    kind = 'invalid_report_destination'
    template = 'The report directory path is invalid: {context}.'


class WriteError(LocalfixError):
    kind = 'write_error'
    template = 'Failed to write the file {context}.'
