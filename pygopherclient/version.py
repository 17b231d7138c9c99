productname = "PyGopherClient"
versionstr = "1.0.0"

versionlist = versionstr.split(".")
major = versionlist[0]
minor = versionlist[1]
patch = versionlist[2]
author = "Michael Lazar"
author_email = "lazar.michael22@gmail.com"
description = "Internet Gopher (RFC 1436) menu client"
license = "GPLv2"
