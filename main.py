import json
import sys

from rich.pretty import pprint

from pureargv import *

__prog__ = "demo"

conf = {
    "color": False,
    "email": None,
    "words": [],
}

color = Flag(lambda conf: {**conf, "color": True})
nocolor = Flag(lambda conf: {**conf, "color": False})


@Option
def email(value):
    if "@" not in value:
        return Left("%s is not a valid email address" % json.dumps(value))
    return Right(lambda conf: {**conf, "email": value})


@Option
def word(value):
    return Right(lambda conf: {**conf, "words": [*conf["words"], value]})


spec = {
    "-c": color,
    "--color": color,
    "--colour": color,
    "--no-color": nocolor,
    "--no-colour": nocolor,
    "-e": email,
    "--email": email,
    "-w": word,
    "--word": word,
}


if __name__ == '__main__':
    match parseargs(spec, Pair(conf, sys.argv[1:])):
        case Left(message):
            trigger(ArgumentFault(message), shell=True, colorful=True, fancy=True)
        case Right(result):
            pprint(result)
