identity = 'http://fault.io/project/python/fault.proleptic'
name = 'proleptic'
abstract = 'Julian Day Number dates interpreted across the Julian and Gregorian calendars.'
icon = '📅'
study = 'chronology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
