class Style:
    regular = 'default'
    info = 'bold cyan'
    context = 'grey50'
    mark = 'bold magenta'
    mark_neutral = 'bold white'
    good = 'green'
    warn = 'yellow'
    bad = 'bold red'
