"""Built-in Kentucky gazetteer tables.

City keys are already in normalized form (lowercase, punctuation replaced by
spaces) so they can be matched directly against normalized article text. The
first county of every city is its primary county.
"""
from __future__ import annotations

KY_COUNTIES: tuple[str, ...] = (
    "Adair", "Allen", "Anderson", "Ballard", "Barren", "Bath", "Bell", "Boone",
    "Bourbon", "Boyd", "Boyle", "Bracken", "Breathitt", "Breckinridge",
    "Bullitt", "Butler", "Caldwell", "Calloway", "Campbell", "Carlisle",
    "Carroll", "Carter", "Casey", "Christian", "Clark", "Clay", "Clinton",
    "Crittenden", "Cumberland", "Daviess", "Edmonson", "Elliott", "Estill",
    "Fayette", "Fleming", "Floyd", "Franklin", "Fulton", "Gallatin", "Garrard",
    "Grant", "Graves", "Grayson", "Green", "Greenup", "Hancock", "Hardin",
    "Harlan", "Harrison", "Hart", "Henderson", "Henry", "Hickman", "Hopkins",
    "Jackson", "Jefferson", "Jessamine", "Johnson", "Kenton", "Knott", "Knox",
    "Larue", "Laurel", "Lawrence", "Lee", "Leslie", "Letcher", "Lewis",
    "Lincoln", "Livingston", "Logan", "Lyon", "Madison", "Magoffin", "Marion",
    "Marshall", "Martin", "Mason", "McCracken", "McCreary", "McLean", "Meade",
    "Menifee", "Mercer", "Metcalfe", "Monroe", "Montgomery", "Morgan",
    "Muhlenberg", "Nelson", "Nicholas", "Ohio", "Oldham", "Owen", "Owsley",
    "Pendleton", "Perry", "Pike", "Powell", "Pulaski", "Robertson",
    "Rockcastle", "Rowan", "Russell", "Scott", "Shelby", "Simpson", "Spencer",
    "Taylor", "Todd", "Trigg", "Trimble", "Union", "Warren", "Washington",
    "Wayne", "Webster", "Whitley", "Wolfe", "Woodford",
)

# County names that collide with common words, first names or places in
# other states. A "<name> County" mention only counts with Kentucky context.
AMBIGUOUS_COUNTY_NAMES: frozenset[str] = frozenset(
    {
        "Allen", "Boyd", "Clay", "Fleming", "Grant", "Green", "Hart", "Lawrence",
        "Lee", "Lewis", "Lincoln", "Logan", "Mason", "Monroe", "Ohio", "Powell",
        "Russell", "Spencer", "Taylor", "Todd", "Warren", "Wayne", "Webster",
    }
)

OUT_OF_STATE_NAMES: tuple[str, ...] = (
    "alabama", "alaska", "arizona", "arkansas", "california", "colorado",
    "connecticut", "delaware", "florida", "georgia", "hawaii", "idaho",
    "illinois", "indiana", "iowa", "kansas", "louisiana", "maine", "maryland",
    "massachusetts", "michigan", "minnesota", "mississippi", "missouri",
    "montana", "nebraska", "nevada", "new hampshire", "new jersey",
    "new mexico", "new york", "north carolina", "north dakota", "ohio",
    "oklahoma", "oregon", "pennsylvania", "rhode island", "south carolina",
    "south dakota", "tennessee", "texas", "utah", "vermont", "virginia",
    "washington", "west virginia", "wisconsin", "wyoming",
)

KY_CITY_COUNTIES: dict[str, tuple[str, ...]] = {
    # Bluegrass and central Kentucky
    "lexington": ("Fayette",),
    "frankfort": ("Franklin",),
    "georgetown": ("Scott",),
    "sadieville": ("Scott",),
    "stamping ground": ("Scott",),
    "nicholasville": ("Jessamine",),
    "wilmore": ("Jessamine",),
    "versailles": ("Woodford",),
    "midway": ("Woodford",),
    "winchester": ("Clark",),
    "paris": ("Bourbon",),
    "millersburg": ("Bourbon",),
    "cynthiana": ("Harrison",),
    "carlisle": ("Nicholas",),
    "richmond": ("Madison",),
    "berea": ("Madison",),
    "danville": ("Boyle",),
    "perryville": ("Boyle",),
    "junction city": ("Boyle", "Lincoln"),
    "harrodsburg": ("Mercer",),
    "burgin": ("Mercer",),
    "lawrenceburg": ("Anderson",),
    "lancaster": ("Garrard",),
    "stanford": ("Lincoln",),
    "crab orchard": ("Lincoln",),
    "hustonville": ("Lincoln",),
    "irvine": ("Estill",),
    "ravenna": ("Estill",),
    "mount sterling": ("Montgomery",),
    "jeffersonville": ("Montgomery",),
    "owenton": ("Owen",),
    # Louisville metro and surrounding counties
    "louisville": ("Jefferson",),
    "jeffersontown": ("Jefferson",),
    "st matthews": ("Jefferson",),
    "shively": ("Jefferson",),
    "lyndon": ("Jefferson",),
    "middletown": ("Jefferson",),
    "douglass hills": ("Jefferson",),
    "hurstbourne": ("Jefferson",),
    "anchorage": ("Jefferson",),
    "prospect": ("Jefferson", "Oldham"),
    "la grange": ("Oldham",),
    "crestwood": ("Oldham",),
    "goshen": ("Oldham",),
    "pewee valley": ("Oldham",),
    "shelbyville": ("Shelby",),
    "simpsonville": ("Shelby",),
    "taylorsville": ("Spencer",),
    "shepherdsville": ("Bullitt",),
    "mount washington": ("Bullitt",),
    "hillview": ("Bullitt",),
    "lebanon junction": ("Bullitt",),
    "bardstown": ("Nelson",),
    "bloomfield": ("Nelson",),
    "new haven": ("Nelson",),
    "new castle": ("Henry",),
    "eminence": ("Henry",),
    "bedford": ("Trimble",),
    "carrollton": ("Carroll",),
    "ghent": ("Carroll",),
    "warsaw": ("Gallatin",),
    "sparta": ("Gallatin",),
    # Northern Kentucky
    "covington": ("Kenton",),
    "independence": ("Kenton",),
    "erlanger": ("Kenton",),
    "elsmere": ("Kenton",),
    "fort mitchell": ("Kenton",),
    "fort wright": ("Kenton",),
    "edgewood": ("Kenton",),
    "villa hills": ("Kenton",),
    "taylor mill": ("Kenton",),
    "ludlow": ("Kenton",),
    "newport": ("Campbell",),
    "fort thomas": ("Campbell",),
    "bellevue": ("Campbell",),
    "dayton": ("Campbell",),
    "alexandria": ("Campbell",),
    "cold spring": ("Campbell",),
    "highland heights": ("Campbell",),
    "florence": ("Boone",),
    "union": ("Boone",),
    "walton": ("Boone", "Kenton"),
    "williamstown": ("Grant",),
    "dry ridge": ("Grant",),
    "crittenden": ("Grant",),
    "falmouth": ("Pendleton",),
    "butler": ("Pendleton",),
    "augusta": ("Bracken",),
    "brooksville": ("Bracken",),
    "germantown": ("Bracken", "Mason"),
    "maysville": ("Mason",),
    "dover": ("Mason",),
    "mount olivet": ("Robertson",),
    # Northeast Kentucky
    "ashland": ("Boyd",),
    "catlettsburg": ("Boyd",),
    "greenup": ("Greenup",),
    "flatwoods": ("Greenup",),
    "russell": ("Greenup",),
    "raceland": ("Greenup",),
    "worthington": ("Greenup",),
    "south shore": ("Greenup",),
    "grayson": ("Carter",),
    "olive hill": ("Carter",),
    "vanceburg": ("Lewis",),
    "flemingsburg": ("Fleming",),
    "morehead": ("Rowan",),
    "owingsville": ("Bath",),
    "frenchburg": ("Menifee",),
    "sandy hook": ("Elliott",),
    "louisa": ("Lawrence",),
    "west liberty": ("Morgan",),
    # Eastern Kentucky
    "pikeville": ("Pike",),
    "elkhorn city": ("Pike",),
    "coal run village": ("Pike",),
    "prestonsburg": ("Floyd",),
    "wheelwright": ("Floyd",),
    "martin": ("Floyd",),
    "allen": ("Floyd",),
    "eastern": ("Floyd",),
    "paintsville": ("Johnson",),
    "inez": ("Martin",),
    "salyersville": ("Magoffin",),
    "hazard": ("Perry",),
    "vicco": ("Perry",),
    "hindman": ("Knott",),
    "whitesburg": ("Letcher",),
    "jenkins": ("Letcher",),
    "fleming neon": ("Letcher",),
    "hyden": ("Leslie",),
    "jackson": ("Breathitt",),
    "campton": ("Wolfe",),
    "beattyville": ("Lee",),
    "booneville": ("Owsley",),
    "stanton": ("Powell",),
    "clay city": ("Powell",),
    "mckee": ("Jackson",),
    "harlan": ("Harlan",),
    "cumberland": ("Harlan",),
    "benham": ("Harlan",),
    "lynch": ("Harlan",),
    "loyall": ("Harlan",),
    "evarts": ("Harlan",),
    "middlesboro": ("Bell",),
    "pineville": ("Bell",),
    # Southeast and Lake Cumberland
    "corbin": ("Whitley", "Knox", "Laurel"),
    "williamsburg": ("Whitley",),
    "barbourville": ("Knox",),
    "london": ("Laurel",),
    "manchester": ("Clay",),
    "mount vernon": ("Rockcastle",),
    "brodhead": ("Rockcastle",),
    "livingston": ("Rockcastle",),
    "somerset": ("Pulaski",),
    "burnside": ("Pulaski",),
    "science hill": ("Pulaski",),
    "eubank": ("Pulaski", "Lincoln"),
    "whitley city": ("McCreary",),
    "monticello": ("Wayne",),
    "albany": ("Clinton",),
    "jamestown": ("Russell",),
    "russell springs": ("Russell",),
    "liberty": ("Casey",),
    "columbia": ("Adair",),
    "burkesville": ("Cumberland",),
    "campbellsville": ("Taylor",),
    "greensburg": ("Green",),
    "lebanon": ("Marion",),
    "loretto": ("Marion",),
    "springfield": ("Washington",),
    # South central Kentucky
    "bowling green": ("Warren",),
    "smiths grove": ("Warren",),
    "oakland": ("Warren",),
    "glasgow": ("Barren",),
    "cave city": ("Barren",),
    "park city": ("Barren",),
    "edmonton": ("Metcalfe",),
    "tompkinsville": ("Monroe",),
    "scottsville": ("Allen",),
    "franklin": ("Simpson",),
    "russellville": ("Logan",),
    "auburn": ("Logan",),
    "adairville": ("Logan",),
    "elkton": ("Todd",),
    "guthrie": ("Todd",),
    "munfordville": ("Hart",),
    "horse cave": ("Hart",),
    "brownsville": ("Edmonson",),
    "morgantown": ("Butler",),
    "leitchfield": ("Grayson",),
    "caneyville": ("Grayson",),
    "clarkson": ("Grayson",),
    # Fort Knox region
    "elizabethtown": ("Hardin",),
    "radcliff": ("Hardin",),
    "vine grove": ("Hardin",),
    "west point": ("Hardin",),
    "muldraugh": ("Meade", "Hardin"),
    "brandenburg": ("Meade",),
    "hodgenville": ("Larue",),
    "hardinsburg": ("Breckinridge",),
    "cloverport": ("Breckinridge",),
    "irvington": ("Breckinridge",),
    # Western Kentucky
    "owensboro": ("Daviess",),
    "whitesville": ("Daviess",),
    "hawesville": ("Hancock",),
    "lewisport": ("Hancock",),
    "hartford": ("Ohio",),
    "beaver dam": ("Ohio",),
    "calhoun": ("McLean",),
    "livermore": ("McLean",),
    "central city": ("Muhlenberg",),
    "greenville": ("Muhlenberg",),
    "henderson": ("Henderson",),
    "corydon": ("Henderson",),
    "morganfield": ("Union",),
    "sturgis": ("Union",),
    "uniontown": ("Union",),
    "dixon": ("Webster",),
    "providence": ("Webster",),
    "sebree": ("Webster",),
    "clay": ("Webster",),
    "madisonville": ("Hopkins",),
    "earlington": ("Hopkins",),
    "nortonville": ("Hopkins",),
    "dawson springs": ("Hopkins", "Caldwell"),
    "princeton": ("Caldwell",),
    "marion": ("Crittenden",),
    "smithland": ("Livingston",),
    "eddyville": ("Lyon",),
    "kuttawa": ("Lyon",),
    "cadiz": ("Trigg",),
    "hopkinsville": ("Christian",),
    "oak grove": ("Christian",),
    "pembroke": ("Christian",),
    "paducah": ("McCracken",),
    "mayfield": ("Graves",),
    "murray": ("Calloway",),
    "hazel": ("Calloway",),
    "benton": ("Marshall",),
    "calvert city": ("Marshall",),
    "wickliffe": ("Ballard",),
    "la center": ("Ballard",),
    "bardwell": ("Carlisle",),
    "clinton": ("Hickman",),
    "hickman": ("Fulton",),
    "fulton": ("Fulton",),
}

# City names that double as everyday words or very common personal names.
# They stay in the city table for lookups but are never auto-detected.
NOISE_CITY_NAMES: frozenset[str] = frozenset(
    {
        "allen", "anchorage", "auburn", "benton", "butler", "calhoun", "clay",
        "clinton", "columbia", "crittenden", "dover", "eminence", "franklin",
        "fulton", "ghent", "hazel", "hickman", "independence", "jackson",
        "liberty", "lynch", "marion", "martin", "midway", "oakland",
        "prospect", "providence", "sparta", "union", "warsaw",
    }
)


__all__ = [
    "AMBIGUOUS_COUNTY_NAMES",
    "KY_CITY_COUNTIES",
    "KY_COUNTIES",
    "NOISE_CITY_NAMES",
    "OUT_OF_STATE_NAMES",
]
